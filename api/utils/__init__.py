"""
Utility modules for the API.
"""

from .logging import setup_logging, log_request, log_generation
from .error_handler import (
    CodeAnalysisError,
    InvalidRequestError,
    ProviderError,
    RouteNotFoundError,
    error_handler
)
from .validators import (
    UNKNOWN_LANGUAGE,
    validate_code,
    normalize_language,
    display_language
)

__all__ = [
    "setup_logging",
    "log_request",
    "log_generation",
    "CodeAnalysisError",
    "InvalidRequestError",
    "ProviderError",
    "RouteNotFoundError",
    "error_handler",
    "UNKNOWN_LANGUAGE",
    "validate_code",
    "normalize_language",
    "display_language"
]
