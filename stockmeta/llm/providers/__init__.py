"""Vision provider implementations."""

from stockmeta.llm.providers.base import BaseVisionProvider, VisionRequest, VisionResponse
from stockmeta.llm.providers.cloud_anthropic import CloudAnthropicProvider
from stockmeta.llm.providers.cloud_gemini import CloudGeminiProvider
from stockmeta.llm.providers.cloud_openai import CloudOpenAIProvider
from stockmeta.llm.providers.local_ollama import LocalOllamaProvider

__all__ = [
    "BaseVisionProvider",
    "VisionRequest",
    "VisionResponse",
    "CloudAnthropicProvider",
    "CloudGeminiProvider",
    "CloudOpenAIProvider",
    "LocalOllamaProvider",
]
