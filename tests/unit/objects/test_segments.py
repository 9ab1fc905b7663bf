"""Unit tests for linear null-byte segmentation."""

from __future__ import annotations

from objects.segments import split_segments


def test_split_segments_returns_header_and_payload() -> None:
    """A single delimiter should give header and payload segments."""
    assert split_segments(b"blob 5\x00hello") == [b"blob 5", b"hello"]


def test_split_segments_omits_empty_trailing_segment() -> None:
    """Bytes after the last null are appended only when non-empty."""
    assert split_segments(b"tree 0\x00") == [b"tree 0"]


def test_split_segments_cuts_at_every_null() -> None:
    """Each null should close a segment, including consecutive nulls."""
    segments = split_segments(b"a\x00\x00b\x00c")

    assert segments == [b"a", b"", b"b", b"c"]
