"""Website analysis and export endpoints.

The handlers only deal with HTTP concerns. Validation, provider calls and
chunking live in ``ScreenshotAnalyzer``; format conversion lives in
``image_export``. Errors raised there are rendered as ``{"error": ...}``
by the exception handlers registered in ``src.main``.
"""

import logging

import logfire
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from src.logging_config import data_uri_summary
from src.models.screenshot_models import (
    AnalyzeResponse,
    ErrorResponse,
    ExportRequest,
    ScreenshotRequest,
)
from src.services.analysis_service import ScreenshotAnalyzer, get_screenshot_analyzer
from src.services.image_export import MEDIA_TYPES, chunk_filename, export_chunk

logger = logging.getLogger(__name__)
router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
    500: {"model": ErrorResponse, "description": "Screenshot provider failure"},
}


@router.post(
    "/analyze-website",
    response_model=AnalyzeResponse,
    response_model_by_alias=True,
    responses=_ERROR_RESPONSES,
)
async def analyze_website(
    request: ScreenshotRequest,
    analyzer: ScreenshotAnalyzer = Depends(get_screenshot_analyzer),
) -> AnalyzeResponse:
    """Capture desktop and mobile full-page screenshots of a URL."""
    result = await analyzer.analyze(request.url)
    return AnalyzeResponse(screenshots=[result])


@router.post(
    "/export",
    response_class=Response,
    responses={422: {"model": ErrorResponse, "description": "Undecodable image"}},
)
async def export_image(request: ExportRequest) -> Response:
    """Re-encode a chunk image and return it as a file download."""
    logfire.info(
        "Export requested",
        profile=request.type,
        chunk_number=request.chunk_number,
        format=request.format,
        **data_uri_summary(request.image_data),
    )
    content = await run_in_threadpool(export_chunk, request.image_data, request.format)
    filename = chunk_filename(request.type, request.chunk_number, request.format)
    logger.info("Exported %s (%d bytes)", filename, len(content))
    return Response(
        content=content,
        media_type=MEDIA_TYPES[request.format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
