"""
Pydantic schemas for API request/response models.
"""

from .analysis import (
    AnalysisRequest,
    AnalysisResponse,
    ReviewResponse,
    ExplanationResponse,
    ImprovementResponse
)
from .common import (
    ErrorResponse,
    HealthResponse
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "ReviewResponse",
    "ExplanationResponse",
    "ImprovementResponse",
    "ErrorResponse",
    "HealthResponse"
]
