"""
User-Facing Error Messages

Maps vision provider failures to the short, human-readable messages shown
next to each image in a batch. The core processing stages never raise, so
every message here describes a failure of the model call itself or of
reading the image.
"""

import logging
from enum import Enum
from typing import Dict

from stockmeta.errors import ImageInputError
from stockmeta.llm.errors import (
    AuthenticationError,
    ConfigurationError,
    EmptyResponseError,
    InvalidRequestError,
    NetworkError,
    ProviderNotAvailableError,
    RateLimitError,
    TimeoutError,
)


logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """Categories of per-image failures."""
    INVALID_CREDENTIAL = "invalid_credential"
    QUOTA_EXCEEDED = "quota_exceeded"
    MALFORMED_REQUEST = "malformed_request"
    SERVICE_UNAVAILABLE = "service_unavailable"
    EMPTY_RESPONSE = "empty_response"
    GENERAL = "general"


MESSAGE_TEMPLATES: Dict[ErrorCategory, str] = {
    ErrorCategory.INVALID_CREDENTIAL: (
        "Invalid or missing API key. Check the key configured for the vision provider."
    ),
    ErrorCategory.QUOTA_EXCEEDED: (
        "API quota or rate limit exceeded. Wait a moment or check your plan, then retry."
    ),
    ErrorCategory.MALFORMED_REQUEST: (
        "The request was rejected as invalid. The image may be corrupt, too large, "
        "or in an unsupported format."
    ),
    ErrorCategory.SERVICE_UNAVAILABLE: (
        "The vision service is unavailable or timed out. Try again later."
    ),
    ErrorCategory.EMPTY_RESPONSE: (
        "The model returned an empty response. The image may have been blocked by a "
        "safety filter."
    ),
    ErrorCategory.GENERAL: "AI generation failed: {details}",
}


def classify_error(error: Exception) -> ErrorCategory:
    """Map an exception to its user-facing category."""
    if isinstance(error, (AuthenticationError, ConfigurationError)):
        return ErrorCategory.INVALID_CREDENTIAL
    if isinstance(error, RateLimitError):
        return ErrorCategory.QUOTA_EXCEEDED
    if isinstance(error, (InvalidRequestError, ImageInputError)):
        return ErrorCategory.MALFORMED_REQUEST
    if isinstance(error, (NetworkError, TimeoutError, ProviderNotAvailableError)):
        return ErrorCategory.SERVICE_UNAVAILABLE
    if isinstance(error, EmptyResponseError):
        return ErrorCategory.EMPTY_RESPONSE
    return ErrorCategory.GENERAL


def user_message(error: Exception) -> str:
    """Return the message to display for a failed image.

    Args:
        error: Exception raised while reading the image or calling the model

    Returns:
        One-line, human-readable message
    """
    category = classify_error(error)
    details = str(error) or type(error).__name__
    logger.debug(f"Classified {type(error).__name__} as {category.value}: {details}")
    return MESSAGE_TEMPLATES[category].format(details=details)
