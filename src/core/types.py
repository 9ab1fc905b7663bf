"""Shared typed models.

This module defines immutable data models used by the decoding
pipeline, the object store layer, and the SDK surface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal, Union

from core.constants import DEFAULT_ERROR_POLICY, KNOWN_OBJECT_TYPES


class ObjectType(str, Enum):
    """Object kinds declared by loose object headers."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"
    TAG = "tag"


@dataclass(frozen=True)
class ObjectHeader:
    """Parsed ``<type> <size>`` header fields.

    Attributes:
        object_type: Type token exactly as written in the header.
        size: Declared payload size in bytes.
    """

    object_type: str
    size: int


@dataclass(frozen=True)
class OpaqueContent:
    """Undifferentiated payload of blob, commit, and tag objects.

    Attributes:
        data: Payload bytes following the header.
    """

    data: bytes
    kind: Literal["opaque"] = field(default="opaque", init=False)

    @property
    def text(self) -> str:
        """Payload decoded as UTF-8 with invalid sequences replaced."""
        return self.data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class DirectoryEntry:
    """One child reference inside a tree object.

    Attributes:
        name: Path component of the child.
        mode: Octal mode text, e.g. ``100644`` or ``40000``.
        hash: Hex digest of the referenced object.
    """

    name: str
    mode: str
    hash: str


@dataclass(frozen=True)
class DirectoryContent:
    """Ordered tree entries in on-disk order."""

    entries: tuple[DirectoryEntry, ...]
    kind: Literal["directory"] = field(default="directory", init=False)


ObjectContent = Union[OpaqueContent, DirectoryContent]


@dataclass(frozen=True)
class StoredObject:
    """Decoded loose object.

    Attributes:
        object_type: Header type token.
        size: Declared payload size; not revalidated against the payload.
        digest: Hex SHA-1 of the full decompressed buffer.
        content: Decoded payload variant.
    """

    object_type: str
    size: int
    digest: str
    content: ObjectContent

    @property
    def is_known_type(self) -> bool:
        """Whether the header type is one of blob, tree, commit, or tag."""
        return self.object_type in KNOWN_OBJECT_TYPES


@dataclass(frozen=True)
class ObjectFailure:
    """Failure row recorded for one object in collect mode.

    Attributes:
        path: Object file path.
        error_type: Exception class name.
        message: Exception message.
    """

    path: str
    error_type: str
    message: str


@dataclass(frozen=True)
class InventoryResult:
    """Outcome of one object store scan."""

    objects: tuple[StoredObject, ...]
    failures: tuple[ObjectFailure, ...] = ()

    @property
    def succeeded(self) -> bool:
        """Whether every object decoded without failure."""
        return not self.failures


@dataclass(frozen=True)
class ScanOptions:
    """Scan command options.

    Attributes:
        repo_root: Working tree root or bare repository directory.
        error_policy: ``fail-fast`` or ``collect``.
        strict_types: Reject unknown header type tokens.
    """

    repo_root: Path
    error_policy: str = DEFAULT_ERROR_POLICY
    strict_types: bool = False
