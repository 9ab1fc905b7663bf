"""Public SDK surface for the object inventory.

This module provides a stable import path for library users.
It re-exports the primary client, typed models, and decode helpers.
"""

from __future__ import annotations

from core.config import InventoryConfig
from core.types import (
    DirectoryContent,
    DirectoryEntry,
    InventoryResult,
    ObjectContent,
    ObjectFailure,
    ObjectType,
    OpaqueContent,
    ScanOptions,
    StoredObject,
)
from objects.assembler import assemble_object, read_object
from store.inventory_payload import render_inventory
from store.inventory_sdk import InventoryClient

__all__ = [
    "DirectoryContent",
    "DirectoryEntry",
    "InventoryClient",
    "InventoryConfig",
    "InventoryResult",
    "ObjectContent",
    "ObjectFailure",
    "ObjectType",
    "OpaqueContent",
    "ScanOptions",
    "StoredObject",
    "assemble_object",
    "read_object",
    "render_inventory",
]
