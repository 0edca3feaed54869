"""
Pytest configuration and fixtures.
"""

import os
import pytest
import sys
from unittest.mock import AsyncMock, MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment before any settings are loaded
os.environ["MOCK_MODE"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("GEMINI_API_KEY", None)

from fastapi.testclient import TestClient

from api.main import create_app
from inference.gemini_runner import GenerationResult


GENERATED_TEXT = "Generated analysis text"


def make_result(text: str = GENERATED_TEXT) -> GenerationResult:
    """Build a provider result for mocked runners."""
    return GenerationResult(
        text=text,
        finish_reason="STOP",
        model="test-model",
        generation_time_ms=12.5
    )


@pytest.fixture
def fake_runner():
    """Runner whose generate() resolves to GENERATED_TEXT."""
    runner = MagicMock()
    runner.generate = AsyncMock(return_value=make_result())
    runner.get_model_info.return_value = {"provider": "test", "model": "test-model"}
    return runner


@pytest.fixture
def failing_runner():
    """Runner whose generate() raises like a provider outage."""
    runner = MagicMock()
    runner.generate = AsyncMock(side_effect=RuntimeError("Provider unavailable"))
    runner.get_model_info.return_value = {"provider": "test", "model": "test-model"}
    return runner


@pytest.fixture
def client(fake_runner):
    """Test client wired to the fake runner."""
    return TestClient(create_app(runner=fake_runner))


@pytest.fixture
def failing_client(failing_runner):
    """Test client wired to the failing runner."""
    return TestClient(create_app(runner=failing_runner))


@pytest.fixture
def sample_python_code():
    """Sample Python code for testing."""
    return '''
def calculate_sum(numbers):
    """Calculate the sum of a list of numbers."""
    total = 0
    for num in numbers:
        total += num
    return total
'''


@pytest.fixture
def sample_javascript_code():
    """Sample JavaScript code for testing."""
    return '''
function calculateTotal(items) {
  var total = 0;
  for (var i = 0; i < items.length; i++) {
    total = total + items[i].price;
  }
  return total;
}
'''
