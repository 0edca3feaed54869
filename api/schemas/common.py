"""
Common schema models used across the API.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error envelope returned on every failed request."""
    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(..., description="Short error category")
    message: Optional[str] = Field(None, description="Diagnostic detail")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Failed to analyze code",
                "message": "Deadline exceeded"
            }
        }
    )


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    message: str = Field(..., description="Service description")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "message": "Intelligent Code Analysis API is running"
            }
        }
    )
