"""Shared pytest fixtures and configuration.

Fixture Categories:
1. Images: sample_png_bytes, tall_png_bytes, sample_data_uri
2. Provider: provider, provider_url, mock_provider
3. Infrastructure: respx_mock, mock_settings, logfire_capture, test_client
"""

import io
import os
from unittest.mock import AsyncMock, patch

import pytest

# Suppress warnings when logfire isn't configured during tests
os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")

import logfire
import respx
from hypothesis import settings
from PIL import Image

from src.services.imaging import encode_data_uri
from src.services.screenshot_provider import ScreenshotProvider

# Property tests generate large inputs; wall-clock deadlines make them flaky.
settings.register_profile("default", deadline=None)
settings.load_profile("default")

PROVIDER_URL = "https://screenshots.test/"


def make_png(width: int, height: int, color=(120, 40, 200, 255)) -> bytes:
    """Encode a solid RGBA PNG of the given size."""
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def sample_png_bytes() -> bytes:
    """Small PNG standing in for a provider capture."""
    return make_png(40, 30)


@pytest.fixture
def tall_png_bytes() -> bytes:
    """PNG tall enough to span several 100px chunks."""
    return make_png(20, 250)


@pytest.fixture
def sample_data_uri(sample_png_bytes) -> str:
    return encode_data_uri(sample_png_bytes)


@pytest.fixture
def provider_url() -> str:
    return PROVIDER_URL


@pytest.fixture
def provider() -> ScreenshotProvider:
    """Provider pointed at a host only reachable through respx."""
    return ScreenshotProvider(base_url=PROVIDER_URL, timeout_seconds=5.0)


@pytest.fixture
def mock_provider(sample_png_bytes):
    """Provider double returning ``sample_png_bytes`` for every profile."""
    mock = AsyncMock(spec=ScreenshotProvider)
    mock.capture = AsyncMock(return_value=sample_png_bytes)
    return mock


@pytest.fixture
def respx_mock():
    """Respx mock fixture for HTTP mocking."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def mock_settings(monkeypatch):
    """Mock application settings."""
    from src.config import Settings

    settings = Settings(
        env="local",
        screenshot_provider_url=PROVIDER_URL,
        screenshot_provider_timeout_seconds=5.0,
        export_delay_seconds=0.0,
        slice_chunks=False,
        logfire_token=None,
        sentry_dsn=None,
    )

    monkeypatch.setattr("src.config.get_settings", lambda: settings)
    # Patch where get_settings is used so request handlers see the mock
    monkeypatch.setattr("src.main.get_settings", lambda: settings)
    monkeypatch.setattr("src.services.analysis_service.get_settings", lambda: settings)
    monkeypatch.setattr("src.services.screenshot_provider.get_settings", lambda: settings)
    monkeypatch.setattr("src.cli.screenshot_cli.get_settings", lambda: settings)
    return settings


@pytest.fixture
def logfire_capture():
    """
    Capture Logfire logs for testing.

    This fixture patches Logfire to capture log calls for assertion.
    """
    captured_logs = []

    original_info = logfire.info
    original_warning = logfire.warning
    original_error = logfire.error

    def capture_info(*args, **kwargs):
        captured_logs.append(("info", args, kwargs))
        return original_info(*args, **kwargs)

    def capture_warning(*args, **kwargs):
        captured_logs.append(("warning", args, kwargs))
        return original_warning(*args, **kwargs)

    def capture_error(*args, **kwargs):
        captured_logs.append(("error", args, kwargs))
        return original_error(*args, **kwargs)

    with (
        patch("logfire.info", side_effect=capture_info),
        patch("logfire.warning", side_effect=capture_warning),
        patch("logfire.error", side_effect=capture_error),
    ):
        yield captured_logs


@pytest.fixture
def test_client(mock_settings):
    """FastAPI TestClient for E2E tests."""
    from fastapi.testclient import TestClient

    from src.main import app

    yield TestClient(app)
    app.dependency_overrides.clear()
