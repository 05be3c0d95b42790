"""Re-encode chunk images for download.

Mirrors the browser export path: decode the inline payload at its natural
size, re-encode as PNG or JPEG, and save under a name derived from the
profile and chunk number.
"""

import asyncio
import io
from pathlib import Path

import logfire

from src.constants import EXPORT_DELAY_SECONDS, JPEG_QUALITY
from src.models.screenshot_models import ExportFormat, FullPageScreenshot
from src.services.imaging import decode_data_uri, open_image

MEDIA_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
}


def chunk_filename(profile: str, chunk_number: int, fmt: ExportFormat) -> str:
    """File name for an exported chunk, e.g. ``desktop-chunk-2.jpg``."""
    return f"{profile}-chunk-{chunk_number}.{fmt}"


def export_chunk(image_data: str, fmt: ExportFormat) -> bytes:
    """
    Convert an inline image payload to the requested format.

    Args:
        image_data: Base64 data URI of the source image
        fmt: ``png`` (lossless) or ``jpg`` (lossy)

    Returns:
        Encoded image bytes

    Raises:
        ClientDecodeError: If the payload cannot be decoded
    """
    if fmt not in MEDIA_TYPES:
        raise ValueError(f"Unsupported export format: {fmt}")

    with open_image(decode_data_uri(image_data)) as image:
        buffer = io.BytesIO()
        if fmt == "jpg":
            # JPEG has no alpha channel
            image.convert("RGB").save(
                buffer, format="JPEG", quality=round(JPEG_QUALITY * 100)
            )
        else:
            image.save(buffer, format="PNG")
    return buffer.getvalue()


def save_chunk(
    image_data: str,
    profile: str,
    chunk_number: int,
    fmt: ExportFormat,
    output_dir: Path,
) -> Path:
    """Export one chunk into ``output_dir``. Nothing is written if conversion fails."""
    content = export_chunk(image_data, fmt)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / chunk_filename(profile, chunk_number, fmt)
    path.write_bytes(content)
    logfire.info(
        "Chunk exported",
        profile=profile,
        chunk_number=chunk_number,
        format=fmt,
        size_bytes=len(content),
    )
    return path


async def export_all_chunks(
    screenshot: FullPageScreenshot,
    fmt: ExportFormat,
    output_dir: Path,
    delay_seconds: float = EXPORT_DELAY_SECONDS,
) -> list[Path]:
    """
    Export every chunk of a screenshot, one at a time.

    Chunks are exported in order with ``delay_seconds`` between successive
    exports. The first failure stops the batch.

    Args:
        screenshot: Screenshot whose chunks are exported
        fmt: Output format
        output_dir: Directory receiving the files
        delay_seconds: Pause between successive exports

    Returns:
        Paths of the written files, in chunk order
    """
    paths: list[Path] = []
    for index, chunk in enumerate(screenshot.chunks):
        if index and delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
        paths.append(
            save_chunk(
                chunk.image_data, screenshot.type, chunk.chunk_number, fmt, output_dir
            )
        )
    return paths
