"""
Shared CLI Option Decorators

Reusable Click decorators for options common to several subcommands.
"""

import sys
from dataclasses import asdict

import click

from stockmeta.config import ConfigurationManager
from stockmeta.errors import ConfigurationError
from stockmeta.llm.factory import LEGACY_PROVIDER_NAMES, PROVIDER_IDS
from stockmeta.utils.logging_config import configure_logging, logging_config

from .help_texts import CONFIG_HELP, KEYWORD_MAX_HELP, KEYWORD_MIN_HELP, PROVIDER_HELP, ExitCodes


def _normalize_provider(ctx, param, value):
    if value is None:
        return None
    value = value.lower()
    return LEGACY_PROVIDER_NAMES.get(value, value)


def provider_option(help=None):
    """Decorator for vision provider selection. Legacy short names map to provider ids."""
    def decorator(f):
        return click.option(
            '--provider', '-p',
            default=None,
            callback=_normalize_provider,
            type=click.Choice(list(PROVIDER_IDS) + list(LEGACY_PROVIDER_NAMES) + ['auto'], case_sensitive=False),
            help=help or PROVIDER_HELP
        )(f)
    return decorator


def model_option(help=None):
    """Decorator for model selection."""
    def decorator(f):
        return click.option(
            '--model', '-m',
            default=None,
            help=help or 'Specific model to use (overrides provider default)'
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            default=None,
            type=click.Path(),
            help=help or CONFIG_HELP
        )(f)
    return decorator


def keyword_bounds_options(f):
    """Decorator adding --keyword-max and --keyword-min."""
    f = click.option('--keyword-min', type=click.IntRange(min=0), default=None, help=KEYWORD_MIN_HELP)(f)
    f = click.option('--keyword-max', type=click.IntRange(min=1), default=None, help=KEYWORD_MAX_HELP)(f)
    return f


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or 'Logging level (default: from configuration, else INFO)'
        )(f)
    return decorator


def load_configuration(config_file, log_level=None, **overrides):
    """Load the merged AppConfig and configure logging from it.

    Exits with INVALID_CONFIGURATION when the configuration is unusable.
    """
    processing = {
        key: value
        for key, value in ((k, overrides.pop(k, None)) for k in ('keyword_max', 'keyword_min'))
        if value is not None
    }
    cli_overrides = dict(overrides, log_level=log_level.lower() if log_level else None)
    if processing:
        cli_overrides['processing'] = processing

    try:
        app_config = ConfigurationManager().load_configuration(config_file, cli_overrides)
    except ConfigurationError as e:
        click.echo(f"❌ Configuration Error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    configure_logging(app_config.log_level, app_config.log_file, force=True)
    logging_config.log_configuration_details(asdict(app_config))
    return app_config
