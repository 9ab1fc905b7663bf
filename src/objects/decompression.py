"""Zlib inflation for loose object files."""

from __future__ import annotations

import zlib

from core.errors import CorruptObjectError


def decompress_object(data: bytes, source: str = "<memory>") -> bytes:
    """Inflate a complete zlib stream.

    Args:
        data: Compressed bytes read from one object file.
        source: Path or label used in error messages.

    Returns:
        Fully decompressed object bytes.

    Raises:
        CorruptObjectError: If the stream is invalid or truncated.
    """
    decompressor = zlib.decompressobj()
    try:
        raw = decompressor.decompress(data) + decompressor.flush()
    except zlib.error as error:
        raise CorruptObjectError(
            f"Failed to inflate object at {source}: {error}. "
            "The object file is not a valid zlib stream."
        ) from error
    if not decompressor.eof:
        raise CorruptObjectError(
            f"Failed to inflate object at {source}: compressed stream is truncated. "
            "Restore the object file from another clone."
        )
    return raw
