"""
Local Ollama Vision Provider

Sends images to a local Ollama service running a vision model (llava,
bakllava, llama3.2-vision, moondream). Returns zero cost for all
operations.

Provider ID: local-ollama
"""

from typing import Any, Dict, Optional

import requests

from stockmeta.llm.config import OllamaConfig
from stockmeta.llm.errors import (
    EmptyResponseError,
    InvalidRequestError,
    NetworkError,
    ProviderError,
    TimeoutError,
)
from stockmeta.llm.providers.base import BaseVisionProvider, VisionRequest, VisionResponse


class LocalOllamaProvider(BaseVisionProvider):
    """Local Ollama vision provider.

    Example:
        >>> provider = LocalOllamaProvider(OllamaConfig(default_model="llava"))
        >>> if provider.validate_requirements():
        ...     response = provider.describe_image(request)
    """

    provider_id = "local-ollama"

    VISION_MODELS = ("llava", "bakllava", "llama3.2-vision", "moondream", "minicpm-v")

    def __init__(self, config: OllamaConfig):
        self.config = config

    def _make_request(self, endpoint: str, data: Optional[Dict] = None) -> Dict:
        """Make an HTTP request to the Ollama API.

        Args:
            endpoint: API endpoint (e.g., "/api/generate")
            data: Request payload (for POST requests)

        Returns:
            Response JSON as dictionary

        Raises:
            NetworkError: If Ollama cannot be reached
            TimeoutError: If the request times out
            InvalidRequestError: If Ollama rejects the request (4xx)
            ProviderError: For any other request failure
        """
        url = f"{self.config.base_url.rstrip('/')}{endpoint}"

        try:
            if data:
                response = requests.post(url, json=data, timeout=self.config.timeout)
            else:
                response = requests.get(url, timeout=self.config.timeout)

            response.raise_for_status()
            return response.json()

        except requests.exceptions.ConnectionError:
            raise NetworkError(
                f"Cannot connect to Ollama at {self.config.base_url}. "
                "Is Ollama running? Start with: ollama serve"
            )
        except requests.exceptions.Timeout:
            raise TimeoutError(f"Ollama request timed out after {self.config.timeout}s")
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status is not None and 400 <= status < 500:
                raise InvalidRequestError(f"Ollama rejected the request: {e}")
            raise ProviderError(f"Ollama API request failed: {e}")
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"Ollama API request failed: {e}")

    def describe_image(self, request: VisionRequest) -> VisionResponse:
        model = request.model or self.config.default_model

        payload = {
            "model": model,
            "prompt": request.prompt,
            "images": [request.image_base64],
            "stream": False,
            "options": {
                "temperature": request.temperature,
                "num_predict": request.max_tokens,
            },
        }
        if request.metadata:
            payload["options"].update(request.metadata)

        response_data = self._make_request("/api/generate", payload)

        content = response_data.get("response") or ""
        if not content.strip():
            raise EmptyResponseError(f"Ollama model {model} returned no text")

        return VisionResponse(
            content=content,
            model_used=model,
            tokens_used=(response_data.get("prompt_eval_count") or 0) + (response_data.get("eval_count") or 0),
            metadata={
                "eval_duration": response_data.get("eval_duration", 0),
                "load_duration": response_data.get("load_duration", 0),
            },
        )

    def list_models(self):
        response = self._make_request("/api/tags")
        return [model["name"] for model in response.get("models", [])]

    def get_capabilities(self) -> Dict[str, Any]:
        available_models = []
        try:
            available_models = self.list_models()
        except ProviderError:
            pass

        return {
            "provider": self.provider_id,
            "default_model": self.config.default_model,
            "supported_models": available_models or list(self.VISION_MODELS),
            "supports_vision": True,
            "cost_per_image": 0.0,
        }

    def validate_requirements(self) -> bool:
        """Check that the Ollama service is running and reachable."""
        try:
            self._make_request("/api/tags")
            return True
        except ProviderError:
            return False
