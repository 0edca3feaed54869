"""
Gemini Runner - Wraps the Google Gemini generation API.
"""

import logging
import time
from typing import Optional
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the provider fails to return generated text."""


@dataclass
class GenerationConfig:
    """Configuration for text generation. Unset values use provider defaults."""
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_output_tokens: Optional[int] = None
    timeout: Optional[float] = None

    def to_provider_config(self) -> dict:
        """Sampling parameters accepted by the provider, without unset values."""
        params = {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_output_tokens": self.max_output_tokens
        }
        return {key: value for key, value in params.items() if value is not None}


@dataclass
class GenerationResult:
    """Result of text generation."""
    text: str
    finish_reason: str
    model: str
    generation_time_ms: float


def _finish_reason_name(candidate) -> str:
    reason = getattr(candidate, "finish_reason", None)
    return getattr(reason, "name", str(reason)) if reason is not None else "UNKNOWN"


class GeminiRunner:
    """
    Long-lived handle to the Gemini API.

    One instance is created at startup and shared by every request. The
    SDK is configured lazily, on the first generation call, so the API can
    boot without a credential and still answer health checks.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gemini-1.5-flash",
        config: Optional[GenerationConfig] = None
    ):
        """
        Initialize Gemini runner.

        Args:
            api_key: Gemini API key
            model_name: Gemini model to use
            config: Default generation configuration
        """
        self.api_key = api_key
        self.model_name = model_name
        self.config = config or GenerationConfig()

        self._model = None
        self._initialized = False

    def initialize(self) -> None:
        """Configure the SDK and create the model handle."""
        if self._initialized:
            return

        if not self.api_key:
            raise GenerationError("GEMINI_API_KEY is not configured")

        import google.generativeai as genai

        logger.info(f"Initializing Gemini model: {self.model_name}")
        genai.configure(api_key=self.api_key)
        self._model = genai.GenerativeModel(self.model_name)
        self._initialized = True

    async def generate(
        self,
        prompt: str,
        config: Optional[GenerationConfig] = None
    ) -> GenerationResult:
        """
        Generate text for a single prompt.

        Args:
            prompt: Input prompt
            config: Generation configuration (defaults to the runner's)

        Returns:
            GenerationResult

        Raises:
            GenerationError on any provider failure
        """
        if not self._initialized:
            self.initialize()

        config = config or self.config
        request_options = {"timeout": config.timeout} if config.timeout else None

        start_time = time.perf_counter()
        try:
            response = await self._model.generate_content_async(
                prompt,
                generation_config=config.to_provider_config() or None,
                request_options=request_options
            )
        except Exception as e:
            logger.error(f"Gemini request failed: {e}")
            raise GenerationError(str(e)) from e
        generation_time_ms = (time.perf_counter() - start_time) * 1000

        text = self._extract_text(response)

        candidates = getattr(response, "candidates", None) or []
        finish_reason = _finish_reason_name(candidates[0]) if candidates else "STOP"

        logger.info(
            f"Gemini generation completed: {self.model_name} "
            f"({len(prompt)} prompt chars, {generation_time_ms:.2f}ms)"
        )

        return GenerationResult(
            text=text,
            finish_reason=finish_reason,
            model=self.model_name,
            generation_time_ms=generation_time_ms
        )

    @staticmethod
    def _extract_text(response) -> str:
        """Pull the generated text out of a provider response."""
        try:
            text = response.text
        except ValueError:
            # .text raises when the candidate carries no parts (blocked, truncated)
            candidates = getattr(response, "candidates", None)
            if candidates:
                raise GenerationError(
                    f"Gemini returned no text. Finish reason: {_finish_reason_name(candidates[0])}"
                )
            raise GenerationError("Gemini returned no candidates")

        if not text:
            raise GenerationError("Gemini returned an empty response")

        return text

    def get_model_info(self) -> dict:
        """Get information about the configured model."""
        return {
            "provider": "gemini",
            "model": self.model_name,
            "status": "initialized" if self._initialized else "not_initialized"
        }


class MockGeminiRunner(GeminiRunner):
    """
    Mock Gemini runner for running without an API key.
    Returns canned analysis text.
    """

    def __init__(self, model_name: str = "mock-gemini", config: Optional[GenerationConfig] = None):
        super().__init__(api_key=None, model_name=model_name, config=config)

    def initialize(self) -> None:
        """Initialize mock runner."""
        self._initialized = True
        logger.info("Mock Gemini runner initialized")

    async def generate(
        self,
        prompt: str,
        config: Optional[GenerationConfig] = None
    ) -> GenerationResult:
        """Generate mock response."""
        if not self._initialized:
            self.initialize()

        return GenerationResult(
            text=self._generate_mock_analysis(prompt),
            finish_reason="STOP",
            model=self.model_name,
            generation_time_ms=0.0
        )

    def _generate_mock_analysis(self, prompt: str) -> str:
        """Generate mock analysis based on prompt."""
        prompt_lower = prompt.lower()

        if "code reviewer" in prompt_lower:
            return """## Code Review (mock)

1. **Code quality**: Readable and consistently formatted.
2. **Potential bugs**: None detected.
3. **Security concerns**: No untrusted input handling found.
4. **Performance**: No obvious hot spots.
5. **Best practices**: Consider adding tests."""
        elif "suggest improvements" in prompt_lower:
            return """## Suggested Improvements (mock)

1. **Refactored code**: No changes required for this sample.
2. **Improvements made**: None.
3. **Benefits**: The original code is already straightforward."""
        elif "explain" in prompt_lower:
            return """## Explanation (mock)

The code defines its inputs, processes them step by step and returns the result."""
        else:
            return "Mock response."
