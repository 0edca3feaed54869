"""
Runner factory - picks the generation runner from settings.
"""

import logging

from config.settings import Settings
from .gemini_runner import GeminiRunner, MockGeminiRunner, GenerationConfig

logger = logging.getLogger(__name__)


def create_runner(settings: Settings) -> GeminiRunner:
    """
    Create the generation runner described by the settings.

    Mock mode returns a MockGeminiRunner; otherwise a GeminiRunner is built
    from the configured key, model and sampling defaults.
    """
    config = GenerationConfig(
        temperature=settings.gemini_temperature,
        top_p=settings.gemini_top_p,
        max_output_tokens=settings.gemini_max_output_tokens,
        timeout=settings.gemini_timeout
    )

    if settings.mock_mode:
        logger.info("Mock mode enabled, using MockGeminiRunner")
        return MockGeminiRunner(config=config)

    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; analysis requests will fail")

    return GeminiRunner(
        api_key=settings.gemini_api_key,
        model_name=settings.gemini_model,
        config=config
    )
