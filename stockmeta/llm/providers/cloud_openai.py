"""
Cloud OpenAI Vision Provider

Sends images to OpenAI's vision-capable chat models (gpt-4o, gpt-4o-mini,
gpt-4-turbo) as base64 data URIs.

Provider ID: cloud-openai
"""

from typing import Any, Dict

from stockmeta.llm.config import OpenAIConfig
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


class CloudOpenAIProvider(BaseVisionProvider):
    """Cloud OpenAI vision provider.

    Configuration is loaded from:
    1. Environment variables (OPENAI_API_KEY, OPENAI_MODEL, etc.)
    2. Config file (config.yaml llm.openai section)
    3. Defaults (gpt-4o, 1024 max_tokens)

    Example:
        >>> provider = CloudOpenAIProvider(OpenAIConfig(api_key="sk-..."))
        >>> response = provider.describe_image(request)
        >>> print(response.content)
    """

    provider_id = "cloud-openai"

    SUPPORTED_MODELS = ("gpt-4o", "gpt-4o-mini", "gpt-4-turbo", "gpt-4.1", "gpt-4.1-mini")

    def __init__(self, config: OpenAIConfig):
        self.config = config
        self._client = None

    @property
    def client(self):
        """Lazy-load the OpenAI client.

        Raises:
            ProviderNotAvailableError: If the OpenAI SDK is not installed
        """
        if self._client is None:
            try:
                import openai
            except ImportError:
                raise ProviderNotAvailableError(
                    "OpenAI SDK not installed. Install with: pip install openai"
                )
            self._client = openai.OpenAI(api_key=self.config.api_key, timeout=self.config.timeout)
        return self._client

    def describe_image(self, request: VisionRequest) -> VisionResponse:
        model = request.model or self.config.default_model

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": request.prompt},
                            {
                                "type": "image_url",
                                "image_url": {"url": request.data_uri, "detail": self.config.detail},
                            },
                        ],
                    }
                ],
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                **request.metadata
            )
        except Exception as e:
            raise self._classify_error(e) from e

        choice = response.choices[0] if response.choices else None
        content = (choice.message.content or "") if choice else ""
        if not content.strip():
            finish_reason = choice.finish_reason if choice else None
            raise EmptyResponseError(f"OpenAI returned no text (finish_reason={finish_reason})")

        usage = getattr(response, "usage", None)
        return VisionResponse(
            content=content,
            model_used=model,
            tokens_used=getattr(usage, "total_tokens", 0) or 0,
            metadata={
                "finish_reason": choice.finish_reason,
                "response_id": response.id,
            },
        )

    @staticmethod
    def _classify_error(error: Exception) -> ProviderError:
        error_msg = str(error).lower()

        if any(marker in error_msg for marker in ("rate limit", "rate_limit", "429", "quota")):
            return RateLimitError(f"OpenAI rate limit exceeded: {error}")
        elif "auth" in error_msg or "401" in error_msg or "403" in error_msg or "api key" in error_msg:
            return AuthenticationError(f"OpenAI authentication failed: {error}")
        elif "invalid" in error_msg or "400" in error_msg:
            return InvalidRequestError(f"Invalid OpenAI request: {error}")
        elif "timeout" in error_msg or "timed out" in error_msg:
            return TimeoutError(f"OpenAI request timed out: {error}")
        elif "network" in error_msg or "connection" in error_msg:
            return NetworkError(f"Network error connecting to OpenAI: {error}")
        return ProviderError(f"OpenAI API call failed: {error}")

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": self.provider_id,
            "default_model": self.config.default_model,
            "supported_models": list(self.SUPPORTED_MODELS),
            "supports_vision": True,
            "cost_per_image": None,
        }

    def validate_requirements(self) -> bool:
        """Check that an API key is configured and the API answers."""
        if not self.config.api_key:
            return False
        try:
            self.client.models.list()
            return True
        except Exception:
            return False
