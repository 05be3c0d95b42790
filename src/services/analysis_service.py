"""Screenshot analysis orchestration.

Validates the submitted URL, captures the page once per viewport profile,
and splits each capture into chunk descriptors. The desktop and mobile
captures run one after the other; a failure in either aborts the whole
analysis and no partial result is returned.
"""

from __future__ import annotations

import asyncio

import logfire

from src.config import get_settings
from src.constants import MAX_CHUNK_HEIGHT
from src.exceptions import ClientDecodeError, UpstreamError
from src.logging_config import summarize_url
from src.models.screenshot_models import (
    PROFILES,
    AnalysisResult,
    FullPageScreenshot,
    ViewportProfile,
)
from src.services.chunker import ChunkSpan, build_chunks
from src.services.imaging import crop_band, encode_data_uri, open_image
from src.services.screenshot_provider import (
    ScreenshotProvider,
    get_screenshot_provider,
)
from src.services.url_validator import require_valid_url


class ScreenshotAnalyzer:
    """Capture and chunk full-page screenshots of a URL.

    By default every chunk carries the complete, undivided capture and the
    page height is the profile's estimate. With ``slice_chunks`` enabled the
    height is measured from the fetched image and each chunk carries its own
    cropped band.

    Example:
        analyzer = ScreenshotAnalyzer(provider=my_provider)
        result = await analyzer.analyze("https://example.com")
    """

    def __init__(
        self,
        provider: ScreenshotProvider,
        max_chunk_height: int = MAX_CHUNK_HEIGHT,
        slice_chunks: bool = False,
        profiles: tuple[ViewportProfile, ...] = PROFILES,
    ):
        self.provider = provider
        self.max_chunk_height = max_chunk_height
        self.slice_chunks = slice_chunks
        self.profiles = profiles

    async def analyze(self, raw_url: str | None) -> AnalysisResult:
        """Validate ``raw_url`` and capture it with every profile.

        Raises:
            ValidationError: If the URL is missing or invalid.
            UpstreamError: If any provider call fails.
        """
        url = require_valid_url(raw_url)

        with logfire.span("analyze website", target=summarize_url(url)):
            screenshots: dict[str, FullPageScreenshot] = {}
            for profile in self.profiles:
                screenshots[profile.name] = await self.capture_profile(url, profile)

        logfire.info(
            "Generated full-page screenshots",
            target=summarize_url(url),
            chunk_counts={name: len(s.chunks) for name, s in screenshots.items()},
        )
        return AnalysisResult(**screenshots)

    async def capture_profile(
        self, url: str, profile: ViewportProfile
    ) -> FullPageScreenshot:
        """Capture one profile and split it into chunks."""
        raw = await self.provider.capture(url, profile)

        if self.slice_chunks:
            # Pillow decode, crop and re-encode are CPU-bound
            return await asyncio.to_thread(self._sliced_screenshot, raw, profile)

        image_data = encode_data_uri(raw)
        chunks = build_chunks(
            profile.estimated_height,
            lambda span: image_data,
            self.max_chunk_height,
        )
        return FullPageScreenshot(
            type=profile.name, total_height=profile.estimated_height, chunks=chunks
        )

    def _sliced_screenshot(
        self, raw: bytes, profile: ViewportProfile
    ) -> FullPageScreenshot:
        try:
            image = open_image(raw)
        except ClientDecodeError as e:
            raise UpstreamError(
                f"Provider returned an undecodable image: {e.detail}",
                profile=profile.name,
            ) from e

        with image:
            total_height = image.height

            def band(span: ChunkSpan) -> str:
                return encode_data_uri(crop_band(image, span.offset, span.height))

            chunks = build_chunks(total_height, band, self.max_chunk_height)

        return FullPageScreenshot(
            type=profile.name, total_height=total_height, chunks=chunks
        )


def get_screenshot_analyzer() -> ScreenshotAnalyzer:
    """Build an analyzer from application settings."""
    settings = get_settings()
    return ScreenshotAnalyzer(
        provider=get_screenshot_provider(),
        max_chunk_height=settings.max_chunk_height,
        slice_chunks=settings.slice_chunks,
    )
