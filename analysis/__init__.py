"""
Prompt templates for code review, explanation and improvement.
"""

from .prompts import (
    PROMPT_BUILDERS,
    build_prompt,
    build_review_prompt,
    build_explain_prompt,
    build_improve_prompt
)

__all__ = [
    "PROMPT_BUILDERS",
    "build_prompt",
    "build_review_prompt",
    "build_explain_prompt",
    "build_improve_prompt"
]
