"""Stored object assembly.

This module runs the decoding stages for one object and combines
digest, header fields, and content into a single immutable record.
"""

from __future__ import annotations

from core.logging_config import get_logger
from core.types import StoredObject
from objects.content_decoder import decode_content
from objects.decompression import decompress_object
from objects.digest import compute_digest
from objects.header import parse_header, split_header

_LOGGER = get_logger(__name__)


def read_object(data: bytes, source: str = "<memory>", strict_types: bool = False) -> StoredObject:
    """Decode one compressed loose object.

    Args:
        data: Compressed object file bytes.
        source: Path or label used in errors and logs.
        strict_types: Reject unknown header type tokens.

    Returns:
        Assembled stored object.

    Raises:
        CorruptObjectError: If inflation fails.
        MalformedHeaderError: If the header is invalid.
        MalformedTreeError: If tree entries are invalid.
    """
    raw = decompress_object(data, source)
    stored_object = assemble_object(raw, strict_types=strict_types)
    _LOGGER.debug(
        "object_decoded",
        source=source,
        digest=stored_object.digest,
        object_type=stored_object.object_type,
        size=stored_object.size,
    )
    return stored_object


def assemble_object(raw: bytes, strict_types: bool = False) -> StoredObject:
    """Build a stored object from decompressed bytes.

    Args:
        raw: Decompressed object bytes.
        strict_types: Reject unknown header type tokens.

    Returns:
        Assembled stored object.
    """
    digest = compute_digest(raw)
    header_bytes, payload = split_header(raw)
    header = parse_header(header_bytes, strict_types=strict_types)
    content = decode_content(header.object_type, payload, header_bytes)
    stored_object = StoredObject(
        object_type=header.object_type,
        size=header.size,
        digest=digest,
        content=content,
    )
    if not stored_object.is_known_type:
        _LOGGER.warning("object_type_unknown", digest=digest, object_type=header.object_type)
    return stored_object
