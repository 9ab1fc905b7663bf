"""Inventory exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base exception for all inventory failures."""


class InventoryConfigError(InventoryError):
    """Raised for invalid runtime configuration."""


class ObjectReadError(InventoryError):
    """Raised when an object file or directory cannot be read."""


class CorruptObjectError(InventoryError):
    """Raised when an object file is not a complete zlib stream."""


class MalformedHeaderError(InventoryError):
    """Raised when an object header is not ``<type> <size>``."""


class UnknownObjectTypeError(MalformedHeaderError):
    """Raised in strict mode for header type tokens outside the known set."""


class MalformedTreeError(InventoryError):
    """Raised when tree entry records violate the entry layout."""
