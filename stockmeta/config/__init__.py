"""
Configuration package: schema, environment variables and the layered manager.
"""

from stockmeta.config.environment import EnvironmentVariables
from stockmeta.config.manager import ConfigurationManager
from stockmeta.config.schema import AppConfig, ProcessingConfig, VALID_PROVIDERS

__all__ = [
    "AppConfig",
    "ConfigurationManager",
    "EnvironmentVariables",
    "ProcessingConfig",
    "VALID_PROVIDERS",
]
