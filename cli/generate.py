"""
Generate Subcommand Module

Sends each image to a vision provider and writes the results:
- metadata mode: a marketplace CSV (Filename, Title, Keywords, Category)
- prompt mode: a JSON list of image-generation prompts

A failing image is reported with a classified message and the rest of
the batch still runs.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from stockmeta.batch import BatchProcessor, BatchReport
from stockmeta.errors import ExportError, ImageInputError
from stockmeta.export import ORIGINAL_EXTENSION, TARGET_EXTENSIONS, default_export_filename, write_metadata_csv
from stockmeta.llm.config import LLMConfig
from stockmeta.llm.errors import ConfigurationError as ProviderConfigurationError
from stockmeta.llm.factory import VisionProviderFactory
from stockmeta.schemas.metadata import ProcessingMode

from .help_texts import GENERATE_HELP, MODE_HELP, OUTPUT_HELP, TARGET_EXTENSION_HELP, ExitCodes
from .shared_options import (
    config_option,
    keyword_bounds_options,
    load_configuration,
    log_level_option,
    model_option,
    provider_option,
)


logger = logging.getLogger(__name__)


@click.command(help=GENERATE_HELP)
@click.argument("inputs", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ProcessingMode], case_sensitive=False),
    default=ProcessingMode.METADATA.value,
    help=MODE_HELP,
)
@provider_option()
@model_option()
@click.option("--output", "-o", type=click.Path(), default=None, help=OUTPUT_HELP)
@click.option("--output-dir", type=click.Path(), default=None, help="Directory for output files (overrides config)")
@click.option(
    "--target-extension",
    type=click.Choice([ORIGINAL_EXTENSION] + list(TARGET_EXTENSIONS), case_sensitive=False),
    default=ORIGINAL_EXTENSION,
    help=TARGET_EXTENSION_HELP,
)
@click.option("--recursive", "-r", is_flag=True, help="Search directories recursively for images")
@click.option("--no-progress", is_flag=True, help="Disable the progress indicator")
@config_option()
@keyword_bounds_options
@log_level_option()
def generate(
    inputs: Tuple[str, ...],
    mode: str,
    provider: Optional[str],
    model: Optional[str],
    output: Optional[str],
    output_dir: Optional[str],
    target_extension: str,
    recursive: bool,
    no_progress: bool,
    config: Optional[str],
    keyword_max: Optional[int],
    keyword_min: Optional[int],
    log_level: Optional[str],
):
    """Generate stock metadata or prompts for images.

    Examples:
        # Metadata CSV for a folder of previews
        stockmeta generate photos/ --provider cloud-openai

        # CSV naming the vector originals instead of the JPEG previews
        stockmeta generate previews/*.jpg --target-extension .eps -o upload.csv

        # Image-generation prompts with a local model
        stockmeta generate photos/ --mode prompt --provider local-ollama
    """
    app_config = load_configuration(
        config,
        log_level,
        llm_provider=provider,
        output_dir=output_dir,
        keyword_max=keyword_max,
        keyword_min=keyword_min,
    )
    processing_mode = ProcessingMode(mode.lower())

    try:
        factory = VisionProviderFactory(LLMConfig.load_from_yaml(config))
        vision_provider = factory.create_provider(app_config.llm_provider)
    except ProviderConfigurationError as e:
        click.echo(f"❌ Configuration Error: {e}", err=True)
        sys.exit(ExitCodes.PROVIDER_NOT_AVAILABLE)

    batch = BatchProcessor(
        vision_provider,
        app_config.processing.build_processor(),
        model=model,
        show_progress=not no_progress,
    )

    try:
        report = batch.process_images(inputs, processing_mode, recursive=recursive)
    except ImageInputError as e:
        click.echo(f"❌ Input Error: {e}", err=True)
        sys.exit(ExitCodes.FILE_NOT_FOUND)

    if report.total == 0:
        click.echo("No supported images found (jpg, jpeg, png, webp, gif).", err=True)
        sys.exit(ExitCodes.FILE_NOT_FOUND)

    _echo_failures(report)

    if report.completed:
        destination = _output_path(output, app_config.output_dir, processing_mode, target_extension)
        try:
            if processing_mode == ProcessingMode.PROMPT:
                _write_prompts(report, destination)
            else:
                write_metadata_csv(report.results, destination, target_extension)
        except ExportError as e:
            click.echo(f"❌ Export Error: {e}", err=True)
            sys.exit(ExitCodes.GENERAL_ERROR)
        click.echo(f"Output saved to: {destination}")

    click.echo(f"✅ {report.summary()}")

    if report.completed == 0:
        sys.exit(ExitCodes.GENERAL_ERROR)
    if report.failed:
        sys.exit(ExitCodes.PARTIAL_FAILURE)


def _output_path(output: Optional[str], output_dir: str, mode: ProcessingMode, target_extension: str) -> Path:
    if output:
        return Path(output)
    if mode == ProcessingMode.PROMPT:
        return Path(output_dir) / "prompts.json"
    return Path(output_dir) / default_export_filename(target_extension)


def _echo_failures(report: BatchReport):
    for result in report.results:
        if result.error:
            click.echo(f"❌ {result.filename}: {result.error}", err=True)


def _write_prompts(report: BatchReport, destination: Path):
    """Save prompt-mode results as a JSON list."""
    prompts = [
        {"filename": r.filename, "prompt": r.prompt.prompt}
        for r in report.results
        if r.succeeded and r.prompt is not None
    ]
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(destination, "w", encoding="utf-8") as f:
            json.dump(prompts, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ExportError(f"Failed to write prompts to {destination}: {e}")
