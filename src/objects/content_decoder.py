"""Payload decoding for stored objects.

Tree payloads are read with a cursor: a ``<mode> <name>`` prefix up to
the next null, then exactly ``DIGEST_LENGTH`` raw digest bytes. Digest
bytes are never scanned for delimiters, so digests containing nulls
decode correctly.
"""

from __future__ import annotations

from core.constants import (
    DIGEST_LENGTH,
    HEADER_FIELD_SEPARATOR,
    KNOWN_OBJECT_TYPES,
    NULL_BYTE,
)
from core.errors import MalformedTreeError
from core.types import (
    DirectoryContent,
    DirectoryEntry,
    ObjectContent,
    ObjectType,
    OpaqueContent,
)
from objects.byte_cursor import ByteCursor
from objects.segments import split_segments


def decode_content(object_type: str, payload: bytes, header: bytes = b"") -> ObjectContent:
    """Decode a payload according to its declared object type.

    Args:
        object_type: Header type token.
        payload: Bytes after the header terminator.
        header: Raw header bytes, used to classify unknown types.

    Returns:
        Directory content for trees, opaque content for other known types.

    Raises:
        MalformedTreeError: If a tree payload violates the entry layout.
    """
    if object_type == ObjectType.TREE.value:
        return decode_directory_entries(payload)
    if object_type in KNOWN_OBJECT_TYPES:
        return OpaqueContent(data=payload)
    return _decode_unknown_content(header, payload)


def decode_directory_entries(payload: bytes) -> DirectoryContent:
    """Decode packed tree entry records.

    Args:
        payload: Tree payload bytes after the header.

    Returns:
        Entries in on-disk order.

    Raises:
        MalformedTreeError: If a prefix lacks a null terminator or a space,
            or fewer than ``DIGEST_LENGTH`` bytes follow a prefix.
    """
    cursor = ByteCursor(payload)
    entries: list[DirectoryEntry] = []
    while not cursor.at_end():
        entries.append(_read_entry(cursor))
    return DirectoryContent(entries=tuple(entries))


def _read_entry(cursor: ByteCursor) -> DirectoryEntry:
    entry_offset = cursor.offset
    prefix = cursor.read_until_null()
    if prefix is None:
        raise MalformedTreeError(
            f"Invalid tree entry at offset {entry_offset}: missing null terminator "
            "after '<mode> <name>'."
        )
    mode, separator, name = prefix.partition(HEADER_FIELD_SEPARATOR)
    if not separator:
        raise MalformedTreeError(
            f"Invalid tree entry at offset {entry_offset}: prefix {prefix!r} "
            "has no space between mode and name."
        )
    digest = cursor.read_exact(DIGEST_LENGTH)
    if digest is None:
        raise MalformedTreeError(
            f"Invalid tree entry at offset {entry_offset}: expected {DIGEST_LENGTH} "
            f"digest bytes, got {cursor.remaining}."
        )
    return DirectoryEntry(
        name=name.decode("utf-8", errors="replace"),
        mode=mode.decode("ascii", errors="replace"),
        hash=digest.hex(),
    )


def _decode_unknown_content(header: bytes, payload: bytes) -> ObjectContent:
    """Classify a payload of unknown type by its null-delimited segment count."""
    segments = split_segments(header + NULL_BYTE + payload)
    if len(segments) == 1:
        return OpaqueContent(data=b"")
    if len(segments) == 2:
        return OpaqueContent(data=segments[1])
    return decode_directory_entries(payload)
