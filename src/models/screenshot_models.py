"""Pydantic models for screenshot analysis requests, results, and exports."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.constants import (
    DESKTOP_ESTIMATED_HEIGHT,
    DESKTOP_VIEWPORT,
    DEVICE_SCALE_FACTOR,
    MOBILE_ESTIMATED_HEIGHT,
    MOBILE_VIEWPORT,
)

ProfileName = Literal["desktop", "mobile"]
ExportFormat = Literal["png", "jpg"]


class CamelModel(BaseModel):
    """Base model that serializes snake_case fields under camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True)
class ViewportProfile:
    """Capture parameters for one device profile."""

    name: ProfileName
    viewport: str
    estimated_height: int
    device_scale_factor: int = DEVICE_SCALE_FACTOR


DESKTOP_PROFILE = ViewportProfile(
    name="desktop",
    viewport=DESKTOP_VIEWPORT,
    estimated_height=DESKTOP_ESTIMATED_HEIGHT,
)
MOBILE_PROFILE = ViewportProfile(
    name="mobile",
    viewport=MOBILE_VIEWPORT,
    estimated_height=MOBILE_ESTIMATED_HEIGHT,
)

# Capture order is fixed: desktop first, then mobile
PROFILES: tuple[ViewportProfile, ...] = (DESKTOP_PROFILE, MOBILE_PROFILE)


class ScreenshotRequest(BaseModel):
    """Body of an analysis request. Validation happens in the service layer."""

    url: str | None = Field(default=None, description="Website URL to capture")


class Chunk(CamelModel):
    """One vertical slice of a full-page screenshot."""

    chunk_number: int = Field(..., ge=1, description="1-based position in the page")
    height: int = Field(..., ge=1, description="Chunk height in pixels")
    image_data: str = Field(..., description="Inline data URI of the chunk image")


class FullPageScreenshot(CamelModel):
    """Full-page capture for a single profile, split into chunks."""

    type: ProfileName
    total_height: int = Field(..., ge=0, description="Page height in pixels")
    chunks: list[Chunk] = Field(default_factory=list)

    def summary(self) -> str:
        """Human-readable size line used by the gallery and the CLI."""
        max_height = self.chunks[0].height if self.chunks else 0
        return (
            f"{self.total_height}px height, {len(self.chunks)} chunks "
            f"of {max_height}px max"
        )


class AnalysisResult(BaseModel):
    """Desktop and mobile captures of one URL."""

    desktop: FullPageScreenshot
    mobile: FullPageScreenshot

    def for_profile(self, name: ProfileName) -> FullPageScreenshot:
        return self.desktop if name == "desktop" else self.mobile


class AnalyzeResponse(BaseModel):
    """Success body of the analysis endpoint."""

    screenshots: list[AnalysisResult]


class ErrorResponse(BaseModel):
    """Error body shared by every endpoint."""

    error: str


class ExportRequest(CamelModel):
    """Request to re-encode one chunk image into a downloadable file."""

    image_data: str = Field(..., min_length=1)
    format: ExportFormat = "png"
    type: ProfileName
    chunk_number: int = Field(..., ge=1)
