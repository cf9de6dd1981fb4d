"""
Vision Provider Configuration

Configuration for every supported vision provider. Values are resolved
with the following precedence:
1. Environment variables (highest priority)
2. Config file values (``llm`` section of .stockmeta/config.yaml)
3. Default values (lowest priority)

Usage:
    >>> from stockmeta.llm.config import LLMConfig
    >>> llm_config = LLMConfig.load_from_yaml('.stockmeta/config.yaml')
    >>> print(llm_config.openai.default_model)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = ".stockmeta/config.yaml"


@dataclass
class OllamaConfig:
    """Configuration for the local Ollama provider.

    Attributes:
        base_url: Base URL for Ollama API (default: http://localhost:11434)
        default_model: Vision-capable model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds (local models may be slower)
    """
    base_url: str = "http://localhost:11434"
    default_model: str = "llava"
    max_tokens: int = 1024
    temperature: float = 0.4
    timeout: int = 180


@dataclass
class OpenAIConfig:
    """Configuration for the OpenAI provider.

    Attributes:
        api_key: OpenAI API key (required for cloud-openai provider)
        default_model: Vision-capable model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds
        detail: Image detail level sent with the image ("low", "high", "auto")
    """
    api_key: str = ""
    default_model: str = "gpt-4o"
    max_tokens: int = 1024
    temperature: float = 0.4
    timeout: int = 60
    detail: str = "auto"


@dataclass
class AnthropicConfig:
    """Configuration for the Anthropic provider.

    Attributes:
        api_key: Anthropic API key (required for cloud-anthropic provider)
        default_model: Vision-capable model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds
    """
    api_key: str = ""
    default_model: str = "claude-3-5-sonnet-20241022"
    max_tokens: int = 1024
    temperature: float = 0.4
    timeout: int = 60


@dataclass
class GeminiConfig:
    """Configuration for the Google Gemini provider.

    Attributes:
        api_key: Gemini API key (required for cloud-gemini provider)
        default_model: Vision-capable model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds
    """
    api_key: str = ""
    default_model: str = "gemini-2.5-flash"
    max_tokens: int = 1024
    temperature: float = 0.4
    timeout: int = 60


@dataclass
class LLMConfig:
    """Complete configuration for all vision providers."""
    ollama: OllamaConfig = field(default_factory=OllamaConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    anthropic: AnthropicConfig = field(default_factory=AnthropicConfig)
    gemini: GeminiConfig = field(default_factory=GeminiConfig)

    @classmethod
    def load_from_yaml(cls, config_path: Optional[str] = None) -> "LLMConfig":
        """Load provider configuration from the ``llm`` section of a YAML file.

        A missing file is not an error: environment variables and defaults
        still apply.

        Args:
            config_path: Path to config YAML file (default: .stockmeta/config.yaml)

        Returns:
            LLMConfig instance with all provider configurations loaded
        """
        llm_section: Dict[str, Any] = {}
        config_file = Path(config_path or DEFAULT_CONFIG_PATH)
        if config_file.exists():
            with open(config_file, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
                llm_section = config_data.get("llm", {}) or {}

        return cls.load_from_dict(llm_section)

    @classmethod
    def load_from_dict(cls, llm_section: Dict[str, Any]) -> "LLMConfig":
        """Load provider configuration from a dictionary.

        Example:
            >>> llm_config = LLMConfig.load_from_dict({'ollama': {'default_model': 'bakllava'}})
        """
        ollama = llm_section.get("ollama", {}) or {}
        openai = llm_section.get("openai", {}) or {}
        anthropic = llm_section.get("anthropic", {}) or {}
        gemini = llm_section.get("gemini", {}) or {}

        ollama_config = OllamaConfig(
            base_url=cls._resolve_value(ollama.get("base_url"), "OLLAMA_BASE_URL", "http://localhost:11434"),
            default_model=cls._resolve_value(ollama.get("default_model"), "OLLAMA_MODEL", "llava"),
            max_tokens=int(cls._resolve_value(ollama.get("max_tokens"), "OLLAMA_MAX_TOKENS", 1024)),
            temperature=float(cls._resolve_value(ollama.get("temperature"), "OLLAMA_TEMPERATURE", 0.4)),
            timeout=int(cls._resolve_value(ollama.get("timeout"), "OLLAMA_TIMEOUT", 180)),
        )

        openai_config = OpenAIConfig(
            api_key=cls._resolve_value(openai.get("api_key"), "OPENAI_API_KEY", ""),
            default_model=cls._resolve_value(openai.get("default_model"), "OPENAI_MODEL", "gpt-4o"),
            max_tokens=int(cls._resolve_value(openai.get("max_tokens"), "OPENAI_MAX_TOKENS", 1024)),
            temperature=float(cls._resolve_value(openai.get("temperature"), "OPENAI_TEMPERATURE", 0.4)),
            timeout=int(cls._resolve_value(openai.get("timeout"), "OPENAI_TIMEOUT", 60)),
            detail=cls._resolve_value(openai.get("detail"), "OPENAI_IMAGE_DETAIL", "auto"),
        )

        anthropic_config = AnthropicConfig(
            api_key=cls._resolve_value(anthropic.get("api_key"), "ANTHROPIC_API_KEY", ""),
            default_model=cls._resolve_value(
                anthropic.get("default_model"), "ANTHROPIC_MODEL", "claude-3-5-sonnet-20241022"
            ),
            max_tokens=int(cls._resolve_value(anthropic.get("max_tokens"), "ANTHROPIC_MAX_TOKENS", 1024)),
            temperature=float(cls._resolve_value(anthropic.get("temperature"), "ANTHROPIC_TEMPERATURE", 0.4)),
            timeout=int(cls._resolve_value(anthropic.get("timeout"), "ANTHROPIC_TIMEOUT", 60)),
        )

        # GOOGLE_API_KEY is the SDK's own variable; GEMINI_API_KEY and the config file win over it
        gemini_config = GeminiConfig(
            api_key=cls._resolve_value(gemini.get("api_key"), "GEMINI_API_KEY", os.environ.get("GOOGLE_API_KEY", "")),
            default_model=cls._resolve_value(gemini.get("default_model"), "GEMINI_MODEL", "gemini-2.5-flash"),
            max_tokens=int(cls._resolve_value(gemini.get("max_tokens"), "GEMINI_MAX_TOKENS", 1024)),
            temperature=float(cls._resolve_value(gemini.get("temperature"), "GEMINI_TEMPERATURE", 0.4)),
            timeout=int(cls._resolve_value(gemini.get("timeout"), "GEMINI_TIMEOUT", 60)),
        )

        return cls(ollama=ollama_config, openai=openai_config, anthropic=anthropic_config, gemini=gemini_config)

    @staticmethod
    def _resolve_value(config_value: Any, env_var: str, default: Any) -> Any:
        """Resolve a value as env var > config value > default."""
        env_value = os.environ.get(env_var)
        if env_value:
            return env_value
        if config_value is not None:
            return config_value
        return default
