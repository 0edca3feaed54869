"""
Code analysis request and response models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class AnalysisRequest(BaseModel):
    """
    Code submitted for review, explanation or improvement.

    Both fields are optional at the schema level so that a missing
    `code` is reported as "Code is required" rather than a schema error.
    """
    code: Optional[str] = Field(None, description="Source code to analyze")
    language: Optional[str] = Field(None, description="Programming language tag, e.g. 'javascript'")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "function add(a, b) { return a + b; }",
                "language": "javascript"
            }
        }
    )


class AnalysisResponse(BaseModel):
    """Fields shared by every successful analysis response."""
    success: bool = Field(default=True)
    language: str = Field(..., description="Echoed language tag, or 'unknown'")
    timestamp: str = Field(..., description="ISO-8601 generation time (UTC)")


class ReviewResponse(AnalysisResponse):
    """Response from /api/review."""
    review: str = Field(..., description="Generated code review")


class ExplanationResponse(AnalysisResponse):
    """Response from /api/explain."""
    explanation: str = Field(..., description="Generated explanation")


class ImprovementResponse(AnalysisResponse):
    """Response from /api/improve."""
    improvements: str = Field(..., description="Generated improvement suggestions")
