"""
API module for the Code Analysis API.
REST gateway over the Gemini generation API.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
