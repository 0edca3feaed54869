"""
Logging for the Code Analysis API.

Two named loggers carry the service's own records:

- ``code_analysis.access``: one record per HTTP request, written when the
  response is ready (method, endpoint, status, duration, analysis kind)
- ``code_analysis.generation``: one record per provider call

Structured fields travel in ``record.context`` so the JSON formatter can
emit them as top-level keys.
"""

import logging
import sys
import json
import time
import uuid
from typing import Optional
from datetime import datetime, timezone

from fastapi import Request

from .error_handler import error_handler

access_logger = logging.getLogger("code_analysis.access")
generation_logger = logging.getLogger("code_analysis.generation")

PLAIN_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class JSONLogFormatter(logging.Formatter):
    """One JSON object per line, with ``record.context`` merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage()
        }
        entry.update(getattr(record, "context", {}))

        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: Optional[str] = None
) -> None:
    """
    Replace the root handlers with stdout (and optionally a file).

    Unknown level names fall back to INFO.
    """
    formatter = JSONLogFormatter() if json_format else logging.Formatter(PLAIN_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=handlers,
        force=True
    )

    # The access middleware already records every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def log_generation(
    request_id: str,
    kind: str,
    model: str,
    prompt_chars: int,
    completion_chars: int,
    duration_ms: float
) -> None:
    """Record one provider call."""
    generation_logger.info(
        f"{kind} generated by {model} in {duration_ms:.0f}ms",
        extra={
            "context": {
                "request_id": request_id,
                "kind": kind,
                "model": model,
                "prompt_chars": prompt_chars,
                "completion_chars": completion_chars,
                "duration_ms": round(duration_ms, 2)
            }
        }
    )


async def log_request(request: Request, call_next):
    """
    Middleware tagging each request with an id and writing its access record.

    Exceptions that escape the routers are turned into the 500 envelope here,
    so those responses also carry ``X-Request-ID``.
    """
    request_id = uuid.uuid4().hex[:8]
    request.state.request_id = request_id
    started = time.perf_counter()

    try:
        response = await call_next(request)
    except Exception as exc:
        response = await error_handler(request, exc)

    response.headers["X-Request-ID"] = request_id

    duration_ms = (time.perf_counter() - started) * 1000
    kind = getattr(request.state, "analysis_kind", None)
    access_logger.log(
        logging.INFO if response.status_code < 400 else logging.WARNING,
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.0f}ms)",
        extra={
            "context": {
                "request_id": request_id,
                "method": request.method,
                "endpoint": request.url.path,
                "kind": kind,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": request.client.host if request.client else None
            }
        }
    )

    return response
