"""Inventory serialization for stored objects.

This module centralizes the external document shape of a scan.
It is reused by the CLI and the SDK render helpers.
"""

from __future__ import annotations

import json
from typing import Iterable

import yaml  # type: ignore[import-untyped]

from core.constants import SUPPORTED_OUTPUT_FORMATS
from core.errors import InventoryConfigError
from core.types import DirectoryContent, ObjectContent, StoredObject


def stored_object_to_payload(stored_object: StoredObject) -> dict[str, object]:
    """Serialize a stored object into a JSON-safe payload.

    Args:
        stored_object: Decoded object.

    Returns:
        Dictionary with ``Type``, ``Size``, ``Digest`` and ``Content`` keys.
    """
    return {
        "Type": stored_object.object_type,
        "Size": stored_object.size,
        "Digest": stored_object.digest,
        "Content": content_to_payload(stored_object.content),
    }


def content_to_payload(content: ObjectContent) -> object:
    """Serialize content: text for opaque payloads, a file list for trees."""
    if isinstance(content, DirectoryContent):
        return {
            "Files": [
                {"Name": entry.name, "Mode": entry.mode, "Hash": entry.hash}
                for entry in content.entries
            ]
        }
    return content.text


def inventory_to_payload(stored_objects: Iterable[StoredObject]) -> list[dict[str, object]]:
    """Serialize objects in scan order."""
    return [stored_object_to_payload(stored_object) for stored_object in stored_objects]


def render_inventory(stored_objects: Iterable[StoredObject], output_format: str = "json") -> str:
    """Render an inventory document.

    Args:
        stored_objects: Objects in scan order.
        output_format: ``json`` or ``yaml``.

    Returns:
        Rendered document text.

    Raises:
        InventoryConfigError: If the format is unsupported.
    """
    payload = inventory_to_payload(stored_objects)
    if output_format == "json":
        return json.dumps(payload)
    if output_format == "yaml":
        return str(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True))
    raise InventoryConfigError(
        f"Unsupported output format '{output_format}'. "
        f"Use one of {', '.join(SUPPORTED_OUTPUT_FORMATS)}."
    )
