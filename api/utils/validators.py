"""
Request validation utilities.
"""

from typing import Optional

from .error_handler import InvalidRequestError

UNKNOWN_LANGUAGE = "unknown"


def validate_code(code: Optional[str]) -> str:
    """
    Validate submitted source code.

    Args:
        code: Code from the request body

    Returns:
        The code, unchanged

    Raises:
        InvalidRequestError if code is missing or empty
    """
    if not code:
        raise InvalidRequestError(error="Code is required")

    return code


def normalize_language(language: Optional[str]) -> Optional[str]:
    """Return the language tag, or None when it is absent or empty."""
    return language or None


def display_language(language: Optional[str]) -> str:
    """Language echoed back to the caller."""
    return normalize_language(language) or UNKNOWN_LANGUAGE
