"""Object header parsing.

This module splits the ``<type> <size>`` header from the payload and
parses it into typed fields.
"""

from __future__ import annotations

from core.constants import HEADER_FIELD_SEPARATOR, KNOWN_OBJECT_TYPES, NULL_BYTE
from core.errors import MalformedHeaderError, UnknownObjectTypeError
from core.types import ObjectHeader


def split_header(raw: bytes) -> tuple[bytes, bytes]:
    """Split decompressed bytes at the header terminator.

    Args:
        raw: Decompressed object bytes.

    Returns:
        Header bytes and payload bytes.

    Raises:
        MalformedHeaderError: If the buffer contains no null terminator.
    """
    header, separator, payload = raw.partition(NULL_BYTE)
    if not separator:
        raise MalformedHeaderError(
            "Invalid object header: no null terminator found. "
            "Expected '<type> <size>' followed by a null byte."
        )
    return header, payload


def parse_header(header: bytes, strict_types: bool = False) -> ObjectHeader:
    """Parse header bytes into type and declared size.

    Args:
        header: Bytes before the first null.
        strict_types: Reject type tokens outside blob, tree, commit, and tag.

    Returns:
        Parsed header fields.

    Raises:
        MalformedHeaderError: If the header is not exactly two fields
            or the size is not a non-negative decimal integer.
        UnknownObjectTypeError: If strict and the type token is unknown.
    """
    fields = header.split(HEADER_FIELD_SEPARATOR)
    if len(fields) != 2:
        raise MalformedHeaderError(
            f"Invalid object header {header!r}: expected 2 fields, got {len(fields)}."
        )
    type_token, size_token = fields
    if not size_token.isdigit():
        raise MalformedHeaderError(
            f"Invalid object header {header!r}: size {size_token!r} is not a "
            "non-negative decimal integer."
        )
    object_type = type_token.decode("ascii", errors="replace")
    if strict_types and object_type not in KNOWN_OBJECT_TYPES:
        raise UnknownObjectTypeError(
            f"Unknown object type {object_type!r}: expected one of "
            f"{', '.join(KNOWN_OBJECT_TYPES)}. Disable strict types to keep it."
        )
    return ObjectHeader(object_type=object_type, size=int(size_token))
