"""
Vision Model Layer

Sends images to a vision-capable model and returns its raw text. This is
the only part of stockmeta that performs network I/O; everything it
returns is handed to ``stockmeta.processing`` as an opaque string.

Usage:
    >>> from stockmeta.llm import LLMConfig, VisionProviderFactory, VisionRequest
    >>> factory = VisionProviderFactory(LLMConfig.load_from_yaml())
    >>> provider = factory.create_provider("auto")
    >>> response = provider.describe_image(VisionRequest(image_base64=..., mime_type="image/jpeg", prompt=...))
"""

from stockmeta.llm.config import AnthropicConfig, GeminiConfig, LLMConfig, OllamaConfig, OpenAIConfig
from stockmeta.llm.errors import (
    AuthenticationError,
    ConfigurationError,
    EmptyResponseError,
    InvalidRequestError,
    LLMError,
    NetworkError,
    ProviderError,
    ProviderNotAvailableError,
    RateLimitError,
    TimeoutError,
)
from stockmeta.llm.factory import AutoSelectionConfig, VisionProviderFactory, PROVIDER_IDS
from stockmeta.llm.instructions import PROMPT_INSTRUCTIONS, build_metadata_instructions, instructions_for
from stockmeta.llm.providers.base import BaseVisionProvider, VisionRequest, VisionResponse

__all__ = [
    "AnthropicConfig",
    "GeminiConfig",
    "LLMConfig",
    "OllamaConfig",
    "OpenAIConfig",
    "AuthenticationError",
    "ConfigurationError",
    "EmptyResponseError",
    "InvalidRequestError",
    "LLMError",
    "NetworkError",
    "ProviderError",
    "ProviderNotAvailableError",
    "RateLimitError",
    "TimeoutError",
    "AutoSelectionConfig",
    "VisionProviderFactory",
    "PROVIDER_IDS",
    "PROMPT_INSTRUCTIONS",
    "build_metadata_instructions",
    "instructions_for",
    "BaseVisionProvider",
    "VisionRequest",
    "VisionResponse",
]
