"""
Configuration Manager

Loads and merges configuration from multiple sources:
- System defaults
- User configuration (~/.stockmeta/config.yaml)
- Project configuration (./.stockmeta/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables (STOCKMETA_*)
- CLI arguments (highest precedence)
"""

import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from stockmeta.config.environment import EnvironmentVariables
from stockmeta.config.schema import AppConfig, ProcessingConfig
from stockmeta.errors import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigurationManager:
    """Manages configuration loading, merging and validation."""

    def __init__(self, user_config_path: Optional[Path] = None, project_config_path: Optional[Path] = None):
        self.user_config_path = user_config_path or Path.home() / ".stockmeta" / "config.yaml"
        self.project_config_path = project_config_path or Path.cwd() / ".stockmeta" / "config.yaml"

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
    ) -> AppConfig:
        """
        Load configuration from all sources with proper precedence.

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides; None values are ignored

        Returns:
            AppConfig: Merged and validated configuration

        Raises:
            ConfigurationError: If a file contains invalid YAML or values are out of range
        """
        config_dict = self._get_default_config()

        if self.user_config_path.exists():
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.user_config_path))

        if self.project_config_path.exists():
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(self.project_config_path))

        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_file}")
            config_dict = self._merge_configs(config_dict, self._load_yaml_file(path))

        config_dict = self._merge_configs(config_dict, self._load_environment_variables())

        if cli_overrides:
            overrides = {k: v for k, v in cli_overrides.items() if v is not None}
            config_dict = self._merge_configs(config_dict, overrides)

        config = self._dict_to_config(config_dict)
        errors = config.validate()
        if errors:
            raise ConfigurationError("Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors))

        logger.debug(f"Loaded configuration: {asdict(config)}")
        return config

    def _get_default_config(self) -> Dict[str, Any]:
        return asdict(AppConfig())

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load and parse a YAML configuration file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {file_path} must contain a mapping")

        # The llm section belongs to stockmeta.llm.config
        data.pop("llm", None)
        return data

    def _load_environment_variables(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}
        env_vars = EnvironmentVariables

        if env_vars.LLM_PROVIDER in os.environ:
            env_config["llm_provider"] = os.environ[env_vars.LLM_PROVIDER]

        if env_vars.LOG_LEVEL in os.environ:
            env_config["log_level"] = os.environ[env_vars.LOG_LEVEL].lower()

        if env_vars.LOG_FILE in os.environ:
            env_config["log_file"] = os.environ[env_vars.LOG_FILE]

        if env_vars.OUTPUT_DIR in os.environ:
            env_config["output_dir"] = os.environ[env_vars.OUTPUT_DIR]

        for var, key in ((env_vars.KEYWORD_MAX, "keyword_max"), (env_vars.KEYWORD_MIN, "keyword_min")):
            if var in os.environ:
                try:
                    env_config.setdefault("processing", {})[key] = int(os.environ[var])
                except ValueError:
                    raise ConfigurationError(f"{var} must be an integer, got '{os.environ[var]}'")

        if env_vars.EXTRA_STOPWORDS in os.environ:
            words = [w.strip() for w in os.environ[env_vars.EXTRA_STOPWORDS].split(",") if w.strip()]
            env_config.setdefault("processing", {})["extra_stopwords"] = words

        return env_config

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        processing_dict = config_dict.get("processing") or {}
        known = {k: v for k, v in config_dict.items() if k in AppConfig.__dataclass_fields__}
        known.pop("processing", None)

        try:
            processing = ProcessingConfig(**processing_dict)
            return AppConfig(processing=processing, **known)
        except TypeError as e:
            raise ConfigurationError(f"Failed to create configuration object: {e}")
