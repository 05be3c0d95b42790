"""Client for the remote full-page screenshot service."""

import time
from typing import Any

import httpx
import logfire

from src.config import get_settings
from src.constants import PROVIDER_IMAGE_TYPE
from src.exceptions import UpstreamError
from src.logging_config import summarize_url
from src.models.screenshot_models import ViewportProfile


def build_capture_params(url: str, profile: ViewportProfile) -> dict[str, Any]:
    """Query parameters for a full-page capture of ``url`` with ``profile``."""
    return {
        "url": url,
        "deviceScaleFactor": profile.device_scale_factor,
        "viewport": profile.viewport,
        "fullPage": "true",
        "type": PROVIDER_IMAGE_TYPE,
    }


class ScreenshotProvider:
    """Fetch full-page screenshots from the remote rendering service.

    One HTTP request per capture. There is no retry and no caching; any
    non-success status or transport error is raised as ``UpstreamError``.
    """

    def __init__(self, base_url: str, timeout_seconds: float):
        """
        Initialize the provider client.

        Args:
            base_url: Endpoint of the rendering service
            timeout_seconds: Timeout for a single capture
        """
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds

    async def capture(self, url: str, profile: ViewportProfile) -> bytes:
        """
        Capture a full-page screenshot of ``url``.

        Args:
            url: Validated target URL
            profile: Viewport profile to render with

        Returns:
            Raw image bytes as returned by the service

        Raises:
            UpstreamError: If the service responds with a non-success status
                or cannot be reached
        """
        start_time = time.time()
        params = build_capture_params(url, profile)

        logfire.info(
            "Requesting screenshot",
            target=summarize_url(url),
            profile=profile.name,
            viewport=profile.viewport,
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds, follow_redirects=True
            ) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.RequestError as e:
            elapsed = time.time() - start_time
            logfire.error(
                "Screenshot provider request error",
                target=summarize_url(url),
                profile=profile.name,
                error=str(e),
                error_type=type(e).__name__,
                response_time_ms=elapsed * 1000,
            )
            raise UpstreamError(
                f"Failed to fetch screenshot: {type(e).__name__}", profile=profile.name
            ) from e

        elapsed = time.time() - start_time
        if not response.is_success:
            logfire.error(
                "Screenshot provider returned an error",
                target=summarize_url(url),
                profile=profile.name,
                status_code=response.status_code,
                response_time_ms=elapsed * 1000,
            )
            raise UpstreamError(
                f"Failed to fetch screenshot: {response.reason_phrase}",
                profile=profile.name,
            )

        logfire.info(
            "Screenshot received",
            target=summarize_url(url),
            profile=profile.name,
            status_code=response.status_code,
            content_type=response.headers.get("content-type"),
            size_bytes=len(response.content),
            response_time_ms=elapsed * 1000,
        )
        return response.content


def get_screenshot_provider() -> ScreenshotProvider:
    """Build a provider from application settings."""
    settings = get_settings()
    return ScreenshotProvider(
        base_url=settings.screenshot_provider_url,
        timeout_seconds=settings.screenshot_provider_timeout_seconds,
    )
