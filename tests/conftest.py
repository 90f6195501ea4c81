"""Pytest configuration for tests."""

import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest
from dotenv import load_dotenv
from starlette.datastructures import Headers

# Load .env.test file if it exists
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path)

# Set test environment variables before any imports (only if not already set)
os.environ.setdefault("LOG_LEVEL", "INFO")
os.environ.setdefault("LOG_FORMAT", "console")


@dataclass
class FakeRequest:
    """Minimal request view with case-insensitive header lookup."""

    method: str
    headers: Headers


@pytest.fixture
def make_request() -> Callable[..., FakeRequest]:
    """Build a request view: make_request("OPTIONS", {"Origin": "https://a.com"})."""

    def _make(method: str = "GET", headers: dict[str, str] | None = None) -> FakeRequest:
        return FakeRequest(method=method, headers=Headers(headers=headers or {}))

    return _make


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast)")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (medium speed)"
    )
