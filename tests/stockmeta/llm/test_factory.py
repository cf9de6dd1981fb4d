"""
Unit Tests for VisionProviderFactory

Tests provider instantiation, caching, legacy name mapping, auto-selection
and configuration errors.
"""

import pytest
from unittest.mock import patch

from stockmeta.llm.config import AnthropicConfig, GeminiConfig, LLMConfig, OllamaConfig, OpenAIConfig
from stockmeta.llm.errors import ConfigurationError
from stockmeta.llm.factory import AutoSelectionConfig, VisionProviderFactory
from stockmeta.llm.providers.cloud_gemini import CloudGeminiProvider
from stockmeta.llm.providers.cloud_openai import CloudOpenAIProvider
from stockmeta.llm.providers.local_ollama import LocalOllamaProvider


@pytest.fixture
def llm_config():
    return LLMConfig(
        ollama=OllamaConfig(base_url="http://localhost:11434"),
        openai=OpenAIConfig(api_key="test_openai_key"),
        anthropic=AnthropicConfig(api_key=""),
        gemini=GeminiConfig(api_key="test_gemini_key"),
    )


@pytest.fixture
def factory(llm_config):
    return VisionProviderFactory(llm_config)


class TestInstantiation:
    def test_create_openai(self, factory):
        assert isinstance(factory.create_provider("cloud-openai"), CloudOpenAIProvider)

    def test_create_gemini(self, factory):
        provider = factory.create_provider("cloud-gemini")
        assert isinstance(provider, CloudGeminiProvider)
        assert provider.config.default_model == "gemini-2.5-flash"

    def test_create_ollama(self, factory):
        assert isinstance(factory.create_provider("local-ollama"), LocalOllamaProvider)

    def test_legacy_names(self, factory):
        assert isinstance(factory.create_provider("openai"), CloudOpenAIProvider)
        assert isinstance(factory.create_provider("ollama"), LocalOllamaProvider)
        assert isinstance(factory.create_provider("gemini"), CloudGeminiProvider)

    def test_instances_cached(self, factory):
        assert factory.create_provider("cloud-openai") is factory.create_provider("openai")

    def test_missing_key(self, factory):
        with pytest.raises(ConfigurationError, match="ANTHROPIC_API_KEY"):
            factory.create_provider("cloud-anthropic")

    def test_missing_gemini_key(self):
        factory = VisionProviderFactory(LLMConfig(gemini=GeminiConfig(api_key="")))
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            factory.create_provider("cloud-gemini")

    def test_unknown_provider(self, factory):
        with pytest.raises(ConfigurationError, match="Unknown provider"):
            factory.create_provider("mistral")


class TestAutoSelection:
    def test_first_valid_provider_wins(self, llm_config):
        factory = VisionProviderFactory(
            llm_config,
            AutoSelectionConfig(priority_order=["cloud-anthropic", "local-ollama", "cloud-openai"]),
        )
        with patch.object(LocalOllamaProvider, "validate_requirements", return_value=True):
            provider = factory.create_provider("auto")
        assert isinstance(provider, LocalOllamaProvider)

    def test_skips_failing_validation(self, llm_config):
        factory = VisionProviderFactory(
            llm_config,
            AutoSelectionConfig(priority_order=["local-ollama", "cloud-openai"]),
        )
        with patch.object(LocalOllamaProvider, "validate_requirements", return_value=False), \
                patch.object(CloudOpenAIProvider, "validate_requirements", return_value=True):
            provider = factory.create_provider("auto")
        assert isinstance(provider, CloudOpenAIProvider)

    def test_nothing_available(self, llm_config):
        factory = VisionProviderFactory(llm_config)
        with patch.object(CloudGeminiProvider, "validate_requirements", return_value=False), \
                patch.object(LocalOllamaProvider, "validate_requirements", return_value=False), \
                patch.object(CloudOpenAIProvider, "validate_requirements", return_value=False):
            with pytest.raises(ConfigurationError, match="No vision providers available"):
                factory.create_provider("auto")
