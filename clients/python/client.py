"""
Python Client SDK for the Intelligent Code Analysis API.
"""

import os
import logging
from typing import Optional, Any
from dataclasses import dataclass
import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000"

# Endpoint -> field holding the generated text
CONTENT_FIELDS = {
    "review": "review",
    "explain": "explanation",
    "improve": "improvements"
}


@dataclass
class AnalysisResult:
    """Successful analysis response."""
    kind: str
    content: str
    language: str
    timestamp: str

    @classmethod
    def from_dict(cls, kind: str, data: dict) -> "AnalysisResult":
        return cls(
            kind=kind,
            content=data.get(CONTENT_FIELDS[kind], ""),
            language=data.get("language", "unknown"),
            timestamp=data.get("timestamp", "")
        )


class CodeAnalysisClientError(Exception):
    """Base exception for client errors."""
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[dict] = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ValidationError(CodeAnalysisClientError):
    """The server rejected the request payload."""
    pass


class NotFoundError(CodeAnalysisClientError):
    """Unknown endpoint."""
    pass


class APIError(CodeAnalysisClientError):
    """General API error."""
    pass


def _build_payload(code: str, language: Optional[str]) -> dict:
    payload = {"code": code}
    if language:
        payload["language"] = language
    return payload


def _raise_for_error(response: httpx.Response) -> None:
    """Convert an error envelope into an exception."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        message = body.get("error", response.text)
        if body.get("message"):
            message = f"{message}: {body['message']}"
    else:
        body = None
        message = response.text

    if response.status_code == 400:
        raise ValidationError(message, response.status_code, body)
    elif response.status_code == 404:
        raise NotFoundError(message, response.status_code, body)
    else:
        raise APIError(message, response.status_code, body)


class CodeAnalysisClient:
    """
    Synchronous client for the Code Analysis API.

    Example:
        with CodeAnalysisClient(base_url="http://localhost:3000") as client:
            result = client.review("function add(a, b) { return a + b; }", language="javascript")
            print(result.content)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL (default: CODE_ANALYSIS_API_URL or http://localhost:3000)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. for tests
        """
        self.base_url = (base_url or os.environ.get("CODE_ANALYSIS_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            transport=transport
        )

    def _request(self, method: str, endpoint: str, json_data: Optional[dict] = None) -> dict[str, Any]:
        """Make HTTP request."""
        url = endpoint if endpoint.startswith("/") else f"/{endpoint}"

        try:
            response = self._client.request(method, url, json=json_data)
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}")

        if response.is_error:
            _raise_for_error(response)
        return response.json()

    def _analyze(self, kind: str, code: str, language: Optional[str]) -> AnalysisResult:
        data = self._request("POST", f"/api/{kind}", _build_payload(code, language))
        return AnalysisResult.from_dict(kind, data)

    def health(self) -> dict:
        """Check that the server is up."""
        return self._request("GET", "/health")

    def review(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        """Request a code review."""
        return self._analyze("review", code, language)

    def explain(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        """Request an explanation."""
        return self._analyze("explain", code, language)

    def improve(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        """Request improvement suggestions."""
        return self._analyze("improve", code, language)

    def close(self) -> None:
        """Close the client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncCodeAnalysisClient:
    """
    Asynchronous client for the Code Analysis API.

    Same interface as CodeAnalysisClient but with async/await support.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or os.environ.get("CODE_ANALYSIS_API_URL", DEFAULT_BASE_URL)).rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
            transport=transport
        )

    async def _request(self, method: str, endpoint: str, json_data: Optional[dict] = None) -> dict[str, Any]:
        url = endpoint if endpoint.startswith("/") else f"/{endpoint}"

        try:
            response = await self._client.request(method, url, json=json_data)
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}")

        if response.is_error:
            _raise_for_error(response)
        return response.json()

    async def _analyze(self, kind: str, code: str, language: Optional[str]) -> AnalysisResult:
        data = await self._request("POST", f"/api/{kind}", _build_payload(code, language))
        return AnalysisResult.from_dict(kind, data)

    async def health(self) -> dict:
        return await self._request("GET", "/health")

    async def review(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        return await self._analyze("review", code, language)

    async def explain(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        return await self._analyze("explain", code, language)

    async def improve(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        return await self._analyze("improve", code, language)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()


# Convenience function for quick usage
def create_client(
    base_url: Optional[str] = None,
    async_client: bool = False
):
    """
    Create a Code Analysis client.

    Args:
        base_url: API base URL
        async_client: Return async client if True

    Returns:
        CodeAnalysisClient or AsyncCodeAnalysisClient
    """
    if async_client:
        return AsyncCodeAnalysisClient(base_url=base_url)
    return CodeAnalysisClient(base_url=base_url)
