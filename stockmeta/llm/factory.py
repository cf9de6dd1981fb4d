"""
Vision Provider Factory

Factory for creating vision providers with auto-selection support.
Handles provider instantiation, caching, and selection of the first
available provider.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from stockmeta.llm.config import LLMConfig
from stockmeta.llm.errors import ConfigurationError
from stockmeta.llm.providers.base import BaseVisionProvider
from stockmeta.llm.providers.cloud_anthropic import CloudAnthropicProvider
from stockmeta.llm.providers.cloud_gemini import CloudGeminiProvider
from stockmeta.llm.providers.cloud_openai import CloudOpenAIProvider
from stockmeta.llm.providers.local_ollama import LocalOllamaProvider


logger = logging.getLogger(__name__)


PROVIDER_IDS = ("cloud-gemini", "cloud-openai", "cloud-anthropic", "local-ollama")

LEGACY_PROVIDER_NAMES = {
    "openai": "cloud-openai",
    "claude": "cloud-anthropic",
    "anthropic": "cloud-anthropic",
    "gemini": "cloud-gemini",
    "google": "cloud-gemini",
    "ollama": "local-ollama",
}


@dataclass
class AutoSelectionConfig:
    """Configuration for auto-selection behavior.

    Attributes:
        priority_order: Providers to try, in order
    """
    priority_order: List[str] = field(default_factory=lambda: list(PROVIDER_IDS))


class VisionProviderFactory:
    """Factory for creating vision providers.

    Example:
        >>> factory = VisionProviderFactory(LLMConfig.load_from_yaml())
        >>> provider = factory.create_provider("cloud-openai")
        >>> # Or use auto-selection
        >>> provider = factory.create_provider("auto")
    """

    def __init__(self, config: LLMConfig, auto_selection: Optional[AutoSelectionConfig] = None):
        self.config = config
        self.auto_selection = auto_selection or AutoSelectionConfig()
        self._provider_cache: Dict[str, BaseVisionProvider] = {}

    def create_provider(self, provider: str) -> BaseVisionProvider:
        """Create (or reuse) the provider with the given id.

        Args:
            provider: Provider id, legacy short name, or "auto"

        Returns:
            Instantiated vision provider

        Raises:
            ConfigurationError: If the provider is unknown or not configured
        """
        provider = LEGACY_PROVIDER_NAMES.get(provider, provider)

        if provider == "auto":
            return self._auto_select_provider()

        if provider not in self._provider_cache:
            self._provider_cache[provider] = self._instantiate_provider(provider)
        return self._provider_cache[provider]

    def _auto_select_provider(self) -> BaseVisionProvider:
        errors = []

        for provider in self.auto_selection.priority_order:
            try:
                provider_instance = self._instantiate_provider(provider)
            except Exception as e:
                errors.append(f"{provider}: {e}")
                continue

            if provider_instance.validate_requirements():
                logger.info(f"Auto-selected vision provider: {provider}")
                self._provider_cache[provider] = provider_instance
                return provider_instance
            errors.append(f"{provider}: validation failed")

        error_details = "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(
            f"No vision providers available. Tried:\n{error_details}\n\n"
            "Setup instructions:\n"
            "  - cloud-gemini: Set GEMINI_API_KEY environment variable\n"
            "  - cloud-openai: Set OPENAI_API_KEY environment variable\n"
            "  - cloud-anthropic: Set ANTHROPIC_API_KEY environment variable\n"
            "  - local-ollama: Start local service with 'ollama serve' and pull a vision model"
        )

    def _instantiate_provider(self, provider: str) -> BaseVisionProvider:
        if provider == "cloud-gemini":
            if not self.config.gemini.api_key:
                raise ConfigurationError(
                    "Gemini API key not configured. "
                    "Set GEMINI_API_KEY environment variable or provide in config."
                )
            return CloudGeminiProvider(self.config.gemini)

        elif provider == "cloud-openai":
            if not self.config.openai.api_key:
                raise ConfigurationError(
                    "OpenAI API key not configured. "
                    "Set OPENAI_API_KEY environment variable or provide in config."
                )
            return CloudOpenAIProvider(self.config.openai)

        elif provider == "cloud-anthropic":
            if not self.config.anthropic.api_key:
                raise ConfigurationError(
                    "Anthropic API key not configured. "
                    "Set ANTHROPIC_API_KEY environment variable or provide in config."
                )
            return CloudAnthropicProvider(self.config.anthropic)

        elif provider == "local-ollama":
            return LocalOllamaProvider(self.config.ollama)

        raise ConfigurationError(
            f"Unknown provider: {provider}. "
            f"Valid options: {', '.join(PROVIDER_IDS)}, auto"
        )
