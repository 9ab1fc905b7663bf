"""Loose object store traversal.

This module locates the objects directory of a repository and
enumerates the ``<xx>/<38 hex>`` files stored beneath it.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import (
    GIT_DIR_NAME,
    HEX_DIGITS,
    OBJECT_DIR_NAME_LENGTH,
    OBJECT_FILE_NAME_LENGTH,
    OBJECTS_DIR_NAME,
)
from core.errors import ObjectReadError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def resolve_objects_dir(repo_root: Path) -> Path:
    """Locate the loose objects directory for a repository.

    Args:
        repo_root: Working tree root or bare repository directory.

    Returns:
        Path to the objects directory.

    Raises:
        ObjectReadError: If neither layout exists under ``repo_root``.
    """
    candidates = (
        repo_root / GIT_DIR_NAME / OBJECTS_DIR_NAME,
        repo_root / OBJECTS_DIR_NAME,
    )
    for candidate in candidates:
        if candidate.is_dir():
            _LOGGER.info("object_store_resolved", objects_dir=str(candidate))
            return candidate
    raise ObjectReadError(
        f"No objects directory found under {repo_root}. "
        f"Expected {GIT_DIR_NAME}/{OBJECTS_DIR_NAME} or {OBJECTS_DIR_NAME}; "
        "point the scan at a repository root."
    )


def list_object_paths(repo_root: Path) -> list[Path]:
    """List loose object files in name order.

    Args:
        repo_root: Working tree root or bare repository directory.

    Returns:
        Sorted object file paths.

    Raises:
        ObjectReadError: If the store cannot be listed.
    """
    objects_dir = resolve_objects_dir(repo_root)
    object_paths: list[Path] = []
    for fanout_dir in _list_directory(objects_dir):
        if not (fanout_dir.is_dir() and _is_hex_name(fanout_dir.name, OBJECT_DIR_NAME_LENGTH)):
            continue
        for object_path in _list_directory(fanout_dir):
            if object_path.is_file() and _is_hex_name(object_path.name, OBJECT_FILE_NAME_LENGTH):
                object_paths.append(object_path)
            else:
                _LOGGER.debug("object_file_skipped", path=str(object_path))
    return object_paths


def read_object_file(object_path: Path) -> bytes:
    """Read raw compressed bytes of one object file.

    Args:
        object_path: Object file path.

    Returns:
        File contents.

    Raises:
        ObjectReadError: If the file cannot be read.
    """
    try:
        return object_path.read_bytes()
    except OSError as error:
        raise ObjectReadError(
            f"Failed to read object file at {object_path}: {error.strerror or error}. "
            "Check file permissions and retry."
        ) from error


def object_id_from_path(object_path: Path) -> str:
    """Return the object id implied by ``<xx>/<38 hex>`` path parts."""
    return f"{object_path.parent.name}{object_path.name}"


def _list_directory(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as error:
        raise ObjectReadError(
            f"Failed to list object directory {directory}: {error.strerror or error}. "
            "Check directory permissions and retry."
        ) from error


def _is_hex_name(name: str, length: int) -> bool:
    return len(name) == length and all(char in HEX_DIGITS for char in name)
