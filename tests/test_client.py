"""
Tests for the Python client SDK.
"""

import asyncio
import json
import pytest
import httpx

from clients.python.client import (
    CodeAnalysisClient,
    AsyncCodeAnalysisClient,
    AnalysisResult,
    ValidationError,
    NotFoundError,
    APIError
)

BASE_URL = "http://analysis.test"


def _success(field, text="Generated", language="javascript"):
    return {
        "success": True,
        field: text,
        "language": language,
        "timestamp": "2026-01-01T00:00:00.000000Z"
    }


def _make_transport(routes, captured=None):
    """MockTransport answering from a {(method, path): (status, body)} table."""
    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        status, body = routes.get(
            (request.method, request.url.path),
            (404, {"success": False, "error": "Endpoint not found"})
        )
        return httpx.Response(status, json=body)
    return httpx.MockTransport(handler)


class TestCodeAnalysisClient:
    """Tests for the synchronous client."""

    @pytest.mark.parametrize("method,path,field", [
        ("review", "/api/review", "review"),
        ("explain", "/api/explain", "explanation"),
        ("improve", "/api/improve", "improvements"),
    ])
    def test_analysis_methods(self, method, path, field):
        captured = []
        transport = _make_transport({("POST", path): (200, _success(field))}, captured)

        with CodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
            result = getattr(client, method)("let a = 1;", language="javascript")

        assert isinstance(result, AnalysisResult)
        assert result.kind == method
        assert result.content == "Generated"
        assert result.language == "javascript"
        assert json.loads(captured[0].content) == {"code": "let a = 1;", "language": "javascript"}

    def test_language_omitted(self):
        captured = []
        transport = _make_transport(
            {("POST", "/api/review"): (200, _success("review", language="unknown"))},
            captured
        )

        with CodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
            result = client.review("x")

        assert json.loads(captured[0].content) == {"code": "x"}
        assert result.language == "unknown"

    def test_health(self):
        transport = _make_transport({("GET", "/health"): (200, {"status": "ok", "message": "running"})})

        with CodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
            assert client.health()["status"] == "ok"

    def test_validation_error(self):
        transport = _make_transport(
            {("POST", "/api/review"): (400, {"success": False, "error": "Code is required"})}
        )

        with CodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
            with pytest.raises(ValidationError) as exc_info:
                client.review("")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Code is required"

    def test_not_found(self):
        with CodeAnalysisClient(base_url=BASE_URL, transport=_make_transport({})) as client:
            with pytest.raises(NotFoundError):
                client.health()

    def test_provider_error(self):
        body = {"success": False, "error": "Failed to explain code", "message": "quota exceeded"}
        transport = _make_transport({("POST", "/api/explain"): (500, body)})

        with CodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
            with pytest.raises(APIError) as exc_info:
                client.explain("x")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Failed to explain code: quota exceeded"
        assert exc_info.value.body == body

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with CodeAnalysisClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(APIError, match="Request failed"):
                client.review("x")

    def test_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("CODE_ANALYSIS_API_URL", "http://example.test:9000/")

        with CodeAnalysisClient() as client:
            assert client.base_url == "http://example.test:9000"


class TestAsyncCodeAnalysisClient:
    """Tests for the asynchronous client."""

    def test_improve(self):
        transport = _make_transport({("POST", "/api/improve"): (200, _success("improvements"))})

        async def run():
            async with AsyncCodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
                return await client.improve("x", language="javascript")

        result = asyncio.run(run())
        assert result.content == "Generated"
        assert result.kind == "improve"

    def test_validation_error(self):
        transport = _make_transport(
            {("POST", "/api/explain"): (400, {"success": False, "error": "Code is required"})}
        )

        async def run():
            async with AsyncCodeAnalysisClient(base_url=BASE_URL, transport=transport) as client:
                await client.explain("")

        with pytest.raises(ValidationError):
            asyncio.run(run())
