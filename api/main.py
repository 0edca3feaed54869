"""
Main FastAPI application for the Code Analysis API.
"""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import Settings, get_settings
from inference import GeminiRunner, create_runner
from api.routes import analysis_router, health_router
from api.utils.logging import setup_logging, log_request
from api.utils.error_handler import error_handler, CodeAnalysisError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    setup_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        log_file=settings.log_file
    )
    logger.info(f"Code Analysis API started with runner: {app.state.runner.get_model_info()}")
    yield


def create_app(
    runner: Optional[GeminiRunner] = None,
    settings: Optional[Settings] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        runner: Generation runner shared by all requests. Built from the
            settings when omitted.
        settings: Application settings (defaults to the global instance)
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Intelligent Code Analysis API",
        description="""
        AI-powered code review, explanation and improvement backed by Google Gemini.

        ## Endpoints

        - **Review** (`/api/review`): quality, bugs, security, performance and best practices
        - **Explain** (`/api/explain`): walkthrough of what the code does
        - **Improve** (`/api/improve`): refactored code with the rationale behind it

        ## Example

        ```python
        import requests

        response = requests.post(
            "http://localhost:3000/api/review",
            json={"code": "function add(a, b) { return a + b; }", "language": "javascript"}
        )
        print(response.json()["review"])
        ```
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.runner = runner or create_runner(settings)

    # Add request logging middleware
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        return await log_request(request, call_next)

    # Add CORS middleware (outermost, so catch-all 500s carry CORS headers too)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    # Add exception handlers
    @app.exception_handler(CodeAnalysisError)
    async def analysis_error_handler(request: Request, exc: CodeAnalysisError):
        return await error_handler(request, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return await error_handler(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return await error_handler(request, exc)

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        return await error_handler(request, exc)

    # Include routers
    app.include_router(health_router)
    app.include_router(analysis_router)

    return app


# Create default app instance
app = create_app()
