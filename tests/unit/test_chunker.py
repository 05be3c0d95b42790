"""Tests for the chunk partitioner."""

import math

import pytest
from hypothesis import given, strategies as st

from src.services.chunker import ChunkSpan, build_chunks, partition_heights


class TestPartitionHeights:
    """Test partition_heights() function."""

    def test_zero_height_yields_no_chunks(self):
        assert partition_heights(0, 4096) == []

    def test_mobile_estimate_splits_into_two_full_chunks(self):
        spans = partition_heights(8192, 4096)

        assert [s.height for s in spans] == [4096, 4096]

    def test_desktop_estimate_splits_into_three_full_chunks(self):
        spans = partition_heights(12288, 4096)

        assert [s.height for s in spans] == [4096, 4096, 4096]
        assert [s.offset for s in spans] == [0, 4096, 8192]

    def test_remainder_becomes_shorter_final_chunk(self):
        spans = partition_heights(5000, 4096)

        assert spans == [
            ChunkSpan(chunk_number=1, offset=0, height=4096),
            ChunkSpan(chunk_number=2, offset=4096, height=904),
        ]

    def test_height_below_max_yields_single_chunk(self):
        assert partition_heights(1000, 4096) == [
            ChunkSpan(chunk_number=1, offset=0, height=1000)
        ]

    def test_default_max_chunk_height(self):
        assert len(partition_heights(4097)) == 2

    @pytest.mark.parametrize("max_chunk_height", [0, -1])
    def test_non_positive_max_height_rejected(self, max_chunk_height):
        with pytest.raises(ValueError):
            partition_heights(100, max_chunk_height)

    def test_negative_total_height_rejected(self):
        with pytest.raises(ValueError):
            partition_heights(-1, 4096)

    @given(
        total_height=st.integers(min_value=0, max_value=200_000),
        max_chunk_height=st.integers(min_value=1, max_value=10_000),
    )
    def test_heights_cover_page_exactly(self, total_height: int, max_chunk_height: int):
        """Property: heights sum to the total and the count is the ceiling."""
        spans = partition_heights(total_height, max_chunk_height)

        assert sum(s.height for s in spans) == total_height
        assert len(spans) == math.ceil(total_height / max_chunk_height)

    @given(
        total_height=st.integers(min_value=0, max_value=200_000),
        max_chunk_height=st.integers(min_value=1, max_value=10_000),
    )
    def test_sequence_numbers_have_no_gaps(self, total_height: int, max_chunk_height: int):
        """Property: chunk numbers are exactly 1..count."""
        spans = partition_heights(total_height, max_chunk_height)

        assert [s.chunk_number for s in spans] == list(range(1, len(spans) + 1))

    @given(
        total_height=st.integers(min_value=1, max_value=200_000),
        max_chunk_height=st.integers(min_value=1, max_value=10_000),
    )
    def test_spans_are_contiguous(self, total_height: int, max_chunk_height: int):
        """Property: each chunk starts where the previous one ended."""
        spans = partition_heights(total_height, max_chunk_height)

        assert spans[0].offset == 0
        for previous, current in zip(spans, spans[1:]):
            assert current.offset == previous.offset + previous.height
            assert previous.height == max_chunk_height
        assert 1 <= spans[-1].height <= max_chunk_height


class TestBuildChunks:
    """Test build_chunks() function."""

    def test_same_payload_on_every_chunk(self):
        chunks = build_chunks(12288, lambda span: "data:image/png;base64,AAAA", 4096)

        assert [c.chunk_number for c in chunks] == [1, 2, 3]
        assert {c.image_data for c in chunks} == {"data:image/png;base64,AAAA"}

    def test_payload_callback_receives_span(self):
        seen = []

        def image_for(span: ChunkSpan) -> str:
            seen.append(span)
            return f"chunk-{span.offset}"

        chunks = build_chunks(5000, image_for, 4096)

        assert [c.image_data for c in chunks] == ["chunk-0", "chunk-4096"]
        assert [s.height for s in seen] == [4096, 904]

    def test_zero_height_builds_nothing(self):
        assert build_chunks(0, lambda span: "unused") == []
