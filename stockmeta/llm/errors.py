"""
Vision Provider Error Classes

Exception hierarchy for failures of the vision model call. Every provider
translates SDK or HTTP failures into one of these classes so callers can
report a per-image message without knowing which provider was used.

Error Hierarchy:
    LLMError (base)
    ├── ConfigurationError (invalid/missing configuration)
    ├── ProviderNotAvailableError (provider not accessible)
    └── ProviderError (request failures)
        ├── AuthenticationError
        ├── RateLimitError
        ├── InvalidRequestError
        ├── TimeoutError
        ├── NetworkError
        └── EmptyResponseError
"""


class LLMError(Exception):
    """Base exception for all vision provider errors.

    Example:
        >>> try:
        >>>     provider.describe_image(request)
        >>> except LLMError as e:
        >>>     logger.error(f"Vision call failed: {e}")
    """
    pass


class ConfigurationError(LLMError):
    """Raised when provider configuration is invalid or missing.

    Common scenarios:
    - Missing API keys
    - Invalid base URLs
    - Out-of-range parameter values (temperature, max_tokens)
    """
    pass


class ProviderError(LLMError):
    """Raised when a provider request fails for a reason not covered below."""
    pass


class ProviderNotAvailableError(LLMError):
    """Raised when a requested provider cannot be used at all.

    Common scenarios:
    - Service not running (e.g., Ollama not started)
    - SDK package not installed
    - Network unreachable
    """
    pass


class RateLimitError(ProviderError):
    """Raised when the provider rate limit or quota is exceeded."""
    pass


class AuthenticationError(ProviderError):
    """Raised when credentials are invalid, expired, or missing."""
    pass


class InvalidRequestError(ProviderError):
    """Raised when the request is malformed or uses unsupported parameters.

    Common scenarios:
    - Unknown model name
    - Unsupported image type
    - Image too large
    """
    pass


class TimeoutError(ProviderError):
    """Raised when the provider does not answer within the configured timeout."""
    pass


class NetworkError(ProviderError):
    """Raised when network connectivity problems prevent the request."""
    pass


class EmptyResponseError(ProviderError):
    """Raised when the provider returns no text.

    Vision models return an empty body when the image was blocked by a
    safety filter or the generation was cut off before producing output.
    """
    pass
