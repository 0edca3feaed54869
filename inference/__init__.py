"""
Inference module for the Code Analysis API.
Wraps the external text-generation provider.
"""

from .gemini_runner import (
    GeminiRunner,
    MockGeminiRunner,
    GenerationConfig,
    GenerationResult,
    GenerationError
)
from .factory import create_runner

__all__ = [
    "GeminiRunner",
    "MockGeminiRunner",
    "GenerationConfig",
    "GenerationResult",
    "GenerationError",
    "create_runner"
]
