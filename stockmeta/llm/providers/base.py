"""
Base Vision Provider Protocol

Defines the abstract base class and standardized request/response formats
for all vision provider implementations, so the batch runner can send an
image to OpenAI, Anthropic or a local Ollama model through one interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


SUPPORTED_MIME_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")


@dataclass
class VisionRequest:
    """Standardized request format for all vision providers.

    Attributes:
        image_base64: Image bytes, base64-encoded (no data-URI prefix)
        mime_type: Image MIME type, e.g. "image/jpeg"
        prompt: Instruction text sent with the image
        max_tokens: Maximum number of tokens to generate
        temperature: Sampling temperature
        model: Optional specific model (overrides provider default)
        metadata: Additional provider-specific parameters
    """
    image_base64: str
    mime_type: str
    prompt: str
    max_tokens: int = 1024
    temperature: float = 0.4
    model: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate request parameters."""
        if not self.image_base64:
            raise ValueError("Image data cannot be empty")
        if self.mime_type not in SUPPORTED_MIME_TYPES:
            raise ValueError(
                f"Unsupported image type: {self.mime_type}. "
                f"Supported: {', '.join(SUPPORTED_MIME_TYPES)}"
            )
        if not self.prompt:
            raise ValueError("Prompt cannot be empty")
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError("temperature must be between 0.0 and 2.0")

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.image_base64}"


@dataclass
class VisionResponse:
    """Standardized response format from all vision providers.

    Attributes:
        content: Raw text produced by the model
        model_used: The model that processed the request
        tokens_used: Total tokens consumed, when the provider reports it
        metadata: Additional provider-specific response data
    """
    content: str
    model_used: str
    tokens_used: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)


class BaseVisionProvider(ABC):
    """Abstract base class for vision provider implementations.

    A provider is responsible for:
    - Sending one image plus instruction text to the model
    - Translating SDK/HTTP failures into ``stockmeta.llm.errors`` classes
    - Reporting its capabilities
    - Checking whether it is usable (credentials, service reachable)
    """

    provider_id: str = ""

    @abstractmethod
    def describe_image(self, request: VisionRequest) -> VisionResponse:
        """Send an image to the model and return its text.

        Args:
            request: Image, instruction text and generation parameters

        Returns:
            VisionResponse with non-empty content

        Raises:
            AuthenticationError: If credentials are rejected
            RateLimitError: If quota or rate limit is exceeded
            InvalidRequestError: If the request is malformed
            TimeoutError: If the request times out
            NetworkError: If the service cannot be reached
            EmptyResponseError: If the model returned no text
            ProviderError: For any other provider failure
        """
        pass

    @abstractmethod
    def get_capabilities(self) -> Dict[str, Any]:
        """Return provider id, default model and feature flags."""
        pass

    @abstractmethod
    def validate_requirements(self) -> bool:
        """Check if the provider is ready to use."""
        pass
