"""
Python client SDK for the Intelligent Code Analysis API.
"""

from .client import (
    CodeAnalysisClient,
    AsyncCodeAnalysisClient,
    AnalysisResult,
    CodeAnalysisClientError,
    ValidationError,
    NotFoundError,
    APIError,
    create_client
)

__all__ = [
    "CodeAnalysisClient",
    "AsyncCodeAnalysisClient",
    "AnalysisResult",
    "CodeAnalysisClientError",
    "ValidationError",
    "NotFoundError",
    "APIError",
    "create_client"
]
