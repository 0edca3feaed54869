"""
Code analysis endpoints: review, explain and improve.
"""

import uuid
import logging
from typing import Optional
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from analysis.prompts import build_prompt
from inference.gemini_runner import GeminiRunner
from ..schemas import (
    AnalysisRequest,
    ReviewResponse,
    ExplanationResponse,
    ImprovementResponse,
    ErrorResponse
)
from ..utils.error_handler import ProviderError
from ..utils.validators import validate_code, normalize_language, display_language
from ..utils.logging import log_generation

router = APIRouter(prefix="/api", tags=["Analysis"])
logger = logging.getLogger(__name__)

# Error category reported when the provider call fails
FAILURE_MESSAGES = {
    "review": "Failed to analyze code",
    "explain": "Failed to explain code",
    "improve": "Failed to improve code"
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Code is missing or the body is invalid"},
    500: {"model": ErrorResponse, "description": "The generation provider failed"}
}


def get_runner(request: Request) -> GeminiRunner:
    """Generation runner injected at application construction."""
    return request.app.state.runner


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a trailing Z."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


async def run_analysis(
    kind: str,
    payload: Optional[AnalysisRequest],
    http_request: Request,
    runner: GeminiRunner
) -> dict:
    """
    Validate, build the prompt, call the provider once and collect the envelope fields.

    Raises:
        InvalidRequestError if code is missing (the provider is never called)
        ProviderError if the provider call fails
    """
    request_id = getattr(http_request.state, "request_id", str(uuid.uuid4())[:8])
    http_request.state.analysis_kind = kind
    payload = payload or AnalysisRequest()

    code = validate_code(payload.code)
    language = normalize_language(payload.language)
    prompt = build_prompt(kind, code, language)

    try:
        result = await runner.generate(prompt)
    except Exception as e:
        logger.error(f"Error during code {kind}: {e}", exc_info=True)
        raise ProviderError(
            error=FAILURE_MESSAGES[kind],
            message=str(e) or e.__class__.__name__
        ) from e

    log_generation(
        request_id=request_id,
        kind=kind,
        model=result.model,
        prompt_chars=len(prompt),
        completion_chars=len(result.text),
        duration_ms=result.generation_time_ms
    )

    return {
        "text": result.text,
        "language": display_language(payload.language),
        "timestamp": utc_timestamp()
    }


@router.post("/review", response_model=ReviewResponse, responses=ERROR_RESPONSES)
async def review_code(
    http_request: Request,
    payload: Optional[AnalysisRequest] = None,
    runner: GeminiRunner = Depends(get_runner)
):
    """
    Review code.

    Returns an assessment of quality, potential bugs, security concerns,
    performance and best practices.
    """
    fields = await run_analysis("review", payload, http_request, runner)
    return ReviewResponse(
        review=fields["text"],
        language=fields["language"],
        timestamp=fields["timestamp"]
    )


@router.post("/explain", response_model=ExplanationResponse, responses=ERROR_RESPONSES)
async def explain_code(
    http_request: Request,
    payload: Optional[AnalysisRequest] = None,
    runner: GeminiRunner = Depends(get_runner)
):
    """
    Explain code.

    Returns a breakdown of what each part of the code does.
    """
    fields = await run_analysis("explain", payload, http_request, runner)
    return ExplanationResponse(
        explanation=fields["text"],
        language=fields["language"],
        timestamp=fields["timestamp"]
    )


@router.post("/improve", response_model=ImprovementResponse, responses=ERROR_RESPONSES)
async def improve_code(
    http_request: Request,
    payload: Optional[AnalysisRequest] = None,
    runner: GeminiRunner = Depends(get_runner)
):
    """
    Suggest improvements.

    Returns a refactored version of the code with the rationale behind it.
    """
    fields = await run_analysis("improve", payload, http_request, runner)
    return ImprovementResponse(
        improvements=fields["text"],
        language=fields["language"],
        timestamp=fields["timestamp"]
    )
