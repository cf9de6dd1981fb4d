"""
Cloud Anthropic Claude Vision Provider

Sends images to Claude 3 / 3.5 models as base64 image content blocks via
the Anthropic Messages API.

Provider ID: cloud-anthropic
"""

from typing import Any, Dict

from stockmeta.llm.config import AnthropicConfig
from stockmeta.llm.errors import (
    AuthenticationError,
    EmptyResponseError,
    InvalidRequestError,
    NetworkError,
    ProviderError,
    ProviderNotAvailableError,
    RateLimitError,
    TimeoutError,
)
from stockmeta.llm.providers.base import BaseVisionProvider, VisionRequest, VisionResponse


class CloudAnthropicProvider(BaseVisionProvider):
    """Cloud Anthropic Claude vision provider.

    Supports the vision-capable Claude models:
    - Claude 3 Opus / Sonnet / Haiku
    - Claude 3.5 Sonnet / Haiku

    Example:
        >>> config = AnthropicConfig(api_key="sk-ant-...")
        >>> provider = CloudAnthropicProvider(config)
        >>> response = provider.describe_image(request)
    """

    provider_id = "cloud-anthropic"

    SUPPORTED_MODELS = (
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
        "claude-3-5-sonnet-20240620",
        "claude-3-5-sonnet-20241022",
        "claude-3-5-haiku-20241022",
    )

    def __init__(self, config: AnthropicConfig):
        """Initialize Cloud Anthropic provider.

        Raises:
            AuthenticationError: If API key is not provided
            ProviderNotAvailableError: If anthropic package is not installed
        """
        if not config.api_key:
            raise AuthenticationError(
                "Anthropic API key not found. Set ANTHROPIC_API_KEY environment "
                "variable or provide api_key in configuration."
            )

        self.config = config

        try:
            import anthropic
        except ImportError:
            raise ProviderNotAvailableError(
                "anthropic package not installed. Install with: pip install anthropic"
            )
        self.client = anthropic.Anthropic(api_key=self.config.api_key, timeout=self.config.timeout)

    def describe_image(self, request: VisionRequest) -> VisionResponse:
        model = request.model or self.config.default_model

        if model not in self.SUPPORTED_MODELS:
            raise InvalidRequestError(
                f"Unsupported Claude vision model: {model}. "
                f"Supported models: {', '.join(self.SUPPORTED_MODELS)}"
            )

        messages = [
            {
                "role": "user",
                "content": [
                    {
                        "type": "image",
                        "source": {
                            "type": "base64",
                            "media_type": request.mime_type,
                            "data": request.image_base64,
                        },
                    },
                    {"type": "text", "text": request.prompt},
                ],
            }
        ]

        try:
            response = self.client.messages.create(
                model=model,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                messages=messages,
            )
        except Exception as e:
            raise self._classify_error(e) from e

        content = "".join(
            getattr(block, "text", "") for block in (response.content or [])
        )
        if not content.strip():
            raise EmptyResponseError(
                f"Claude returned no text (stop_reason={getattr(response, 'stop_reason', None)})"
            )

        input_tokens = response.usage.input_tokens
        output_tokens = response.usage.output_tokens
        return VisionResponse(
            content=content,
            model_used=model,
            tokens_used=input_tokens + output_tokens,
            metadata={
                "provider": "anthropic",
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "stop_reason": getattr(response, "stop_reason", None),
            },
        )

    @staticmethod
    def _classify_error(error: Exception) -> ProviderError:
        error_msg = str(error).lower()

        if "rate_limit" in error_msg or "rate limit" in error_msg or "429" in error_msg:
            return RateLimitError(f"Claude rate limit exceeded: {error}")
        elif "authentication" in error_msg or "api_key" in error_msg or "401" in error_msg:
            return AuthenticationError(f"Claude authentication failed: {error}")
        elif "invalid" in error_msg or "400" in error_msg:
            return InvalidRequestError(f"Invalid Claude request: {error}")
        elif "timeout" in error_msg or "timed out" in error_msg:
            return TimeoutError(f"Claude request timed out: {error}")
        elif "overloaded" in error_msg or "529" in error_msg or "connection" in error_msg:
            return NetworkError(f"Claude service unavailable: {error}")
        return ProviderError(f"Claude API error: {error}")

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": self.provider_id,
            "default_model": self.config.default_model,
            "supported_models": list(self.SUPPORTED_MODELS),
            "supports_vision": True,
            "cost_per_image": None,
        }

    def validate_requirements(self) -> bool:
        return self.client is not None and bool(self.config.api_key)
