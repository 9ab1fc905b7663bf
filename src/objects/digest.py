"""Content-addressing digest for decompressed objects."""

from __future__ import annotations

import hashlib

from core.constants import DIGEST_ALGORITHM


def compute_digest(raw: bytes) -> str:
    """Hash the complete decompressed buffer, header included.

    Args:
        raw: Decompressed object bytes, exactly as inflated.

    Returns:
        Lowercase hex digest.
    """
    hasher = hashlib.new(DIGEST_ALGORITHM)
    hasher.update(raw)
    return hasher.hexdigest()
