"""
Cloud Gemini Vision Provider

Sends images to Google's Gemini models (gemini-2.5-flash, gemini-2.5-pro)
as inline image parts next to the text prompt.

Provider ID: cloud-gemini
"""

import base64
import binascii
from typing import Any, Dict

from stockmeta.llm.config import GeminiConfig
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


def _genai_types():
    try:
        from google.genai import types
    except ImportError:
        raise ProviderNotAvailableError(
            "Google GenAI SDK not installed. Install with: pip install google-genai"
        )
    return types


class CloudGeminiProvider(BaseVisionProvider):
    """Cloud Gemini vision provider.

    Configuration is loaded from:
    1. Environment variables (GEMINI_API_KEY, GEMINI_MODEL, etc.)
    2. Config file (config.yaml llm.gemini section)
    3. GOOGLE_API_KEY, then defaults (gemini-2.5-flash, 1024 max_tokens)

    Example:
        >>> provider = CloudGeminiProvider(GeminiConfig(api_key="AIza..."))
        >>> response = provider.describe_image(request)
        >>> print(response.content)
    """

    provider_id = "cloud-gemini"

    SUPPORTED_MODELS = ("gemini-2.5-flash", "gemini-2.5-pro", "gemini-2.0-flash")

    def __init__(self, config: GeminiConfig):
        self.config = config
        self._client = None

    @property
    def client(self):
        """Lazy-load the Google GenAI client.

        Raises:
            ProviderNotAvailableError: If the google-genai SDK is not installed
        """
        if self._client is None:
            types = _genai_types()
            from google import genai

            self._client = genai.Client(
                api_key=self.config.api_key,
                http_options=types.HttpOptions(timeout=self.config.timeout * 1000),
            )
        return self._client

    def describe_image(self, request: VisionRequest) -> VisionResponse:
        types = _genai_types()
        model = request.model or self.config.default_model

        try:
            image_bytes = base64.b64decode(request.image_base64, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidRequestError(f"Image data is not valid base64: {e}") from e

        try:
            response = self.client.models.generate_content(
                model=model,
                contents=[
                    request.prompt,
                    types.Part.from_bytes(data=image_bytes, mime_type=request.mime_type),
                ],
                config=types.GenerateContentConfig(
                    max_output_tokens=request.max_tokens,
                    temperature=request.temperature,
                    **request.metadata
                ),
            )
        except Exception as e:
            raise self._classify_error(e) from e

        candidates = response.candidates or []
        finish_reason = candidates[0].finish_reason if candidates else None
        content = response.text or ""
        if not content.strip():
            block_reason = getattr(response.prompt_feedback, "block_reason", None)
            raise EmptyResponseError(
                f"Gemini returned no text (finish_reason={finish_reason}, block_reason={block_reason})"
            )

        usage = getattr(response, "usage_metadata", None)
        return VisionResponse(
            content=content,
            model_used=model,
            tokens_used=getattr(usage, "total_token_count", 0) or 0,
            metadata={
                "finish_reason": finish_reason,
                "model_version": getattr(response, "model_version", None),
            },
        )

    @staticmethod
    def _classify_error(error: Exception) -> ProviderError:
        error_msg = str(error).lower()

        # Gemini reports a bad key as 400 INVALID_ARGUMENT, so keys are checked first
        if "api key" in error_msg or "api_key" in error_msg:
            return AuthenticationError(f"Gemini authentication failed: {error}")
        elif any(marker in error_msg for marker in ("resource_exhausted", "rate limit", "429", "quota")):
            return RateLimitError(f"Gemini rate limit exceeded: {error}")
        elif any(marker in error_msg for marker in ("permission_denied", "unauthenticated", "401", "403")):
            return AuthenticationError(f"Gemini authentication failed: {error}")
        elif "invalid_argument" in error_msg or "400" in error_msg:
            return InvalidRequestError(f"Invalid Gemini request: {error}")
        elif any(marker in error_msg for marker in ("deadline", "timeout", "timed out")):
            return TimeoutError(f"Gemini request timed out: {error}")
        elif "network" in error_msg or "connect" in error_msg:
            return NetworkError(f"Network error connecting to Gemini: {error}")
        return ProviderError(f"Gemini API call failed: {error}")

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": self.provider_id,
            "default_model": self.config.default_model,
            "supported_models": list(self.SUPPORTED_MODELS),
            "supports_vision": True,
            "cost_per_image": None,
        }

    def validate_requirements(self) -> bool:
        """Check that an API key is configured and the default model is reachable."""
        if not self.config.api_key:
            return False
        try:
            self.client.models.get(model=self.config.default_model)
            return True
        except Exception:
            return False
