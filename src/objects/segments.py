"""Linear null-byte segmentation of decompressed objects.

The scan cannot tell a delimiter from a null inside a binary digest,
so segments are only used to classify payloads of unknown type.
"""

from __future__ import annotations

from core.constants import NULL_BYTE


def split_segments(raw: bytes) -> list[bytes]:
    """Split a buffer at every null byte in one left-to-right pass.

    Args:
        raw: Decompressed object bytes; segment 0 is the header.

    Returns:
        Segments in order, plus a trailing segment only if non-empty.
    """
    segments: list[bytes] = []
    start = 0
    null_value = NULL_BYTE[0]
    for index, value in enumerate(raw):
        if value == null_value:
            segments.append(raw[start:index])
            start = index + 1
    if len(raw) > start:
        segments.append(raw[start:])
    return segments
