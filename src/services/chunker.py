"""Split a full-page height into fixed-size chunks."""

from typing import Callable, NamedTuple

from src.constants import MAX_CHUNK_HEIGHT
from src.models.screenshot_models import Chunk


class ChunkSpan(NamedTuple):
    """Position of one chunk inside the page.

    Attributes:
        chunk_number: 1-based sequence number.
        offset: Top edge of the chunk in pixels.
        height: Chunk height in pixels.
    """

    chunk_number: int
    offset: int
    height: int


def partition_heights(
    total_height: int, max_chunk_height: int = MAX_CHUNK_HEIGHT
) -> list[ChunkSpan]:
    """Cover ``[0, total_height)`` with chunks of at most ``max_chunk_height``.

    Every chunk is full height except possibly the last one. A zero height
    yields no chunks.

    Args:
        total_height: Page height in pixels.
        max_chunk_height: Maximum height of a single chunk.

    Returns:
        Chunk spans ordered top to bottom, numbered from 1.

    Raises:
        ValueError: If ``total_height`` is negative or ``max_chunk_height``
            is not positive.
    """
    if max_chunk_height <= 0:
        raise ValueError(f"max_chunk_height must be positive, got {max_chunk_height}")
    if total_height < 0:
        raise ValueError(f"total_height must not be negative, got {total_height}")

    spans: list[ChunkSpan] = []
    offset = 0
    chunk_number = 1
    while offset < total_height:
        spans.append(
            ChunkSpan(
                chunk_number=chunk_number,
                offset=offset,
                height=min(max_chunk_height, total_height - offset),
            )
        )
        offset += max_chunk_height
        chunk_number += 1
    return spans


def build_chunks(
    total_height: int,
    image_for: Callable[[ChunkSpan], str],
    max_chunk_height: int = MAX_CHUNK_HEIGHT,
) -> list[Chunk]:
    """Partition ``total_height`` and attach an image payload to each span.

    Args:
        total_height: Page height in pixels.
        image_for: Returns the data URI for a given span.
        max_chunk_height: Maximum height of a single chunk.
    """
    return [
        Chunk(chunk_number=span.chunk_number, height=span.height, image_data=image_for(span))
        for span in partition_heights(total_height, max_chunk_height)
    ]
