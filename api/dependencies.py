"""Shared API settings, processor and provider factory for request handlers."""

from functools import lru_cache

from fastapi import HTTPException

from api.config import APIConfig
from stockmeta.config import ConfigurationManager
from stockmeta.errors import ConfigurationError
from stockmeta.llm.config import LLMConfig
from stockmeta.llm.factory import VisionProviderFactory
from stockmeta.processing.processor import MetadataProcessor


def get_api_config() -> APIConfig:
    """Read API settings per request so key changes apply without a restart."""
    return APIConfig.load()


@lru_cache(maxsize=1)
def _load_processor() -> MetadataProcessor:
    return ConfigurationManager().load_configuration().processing.build_processor()


def get_processor() -> MetadataProcessor:
    try:
        return _load_processor()
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=f"Invalid configuration: {e}")


@lru_cache(maxsize=1)
def get_provider_factory() -> VisionProviderFactory:
    return VisionProviderFactory(LLMConfig.load_from_yaml())
