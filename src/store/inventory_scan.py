"""Scan orchestration over a loose object store.

This module walks object files, runs the decoding pipeline per file,
and applies the configured error policy across the whole scan.
"""

from __future__ import annotations

from pathlib import Path

from core.constants import ERROR_POLICY_COLLECT
from core.errors import InventoryError
from core.logging_config import get_logger
from core.types import InventoryResult, ObjectFailure, ScanOptions, StoredObject
from objects.assembler import read_object
from store.object_store import list_object_paths, object_id_from_path, read_object_file

_LOGGER = get_logger(__name__)


class InventoryScanRunner:
    """Runner that decodes every loose object under one repository."""

    def __init__(self, options: ScanOptions) -> None:
        self._options = options
        self._objects: list[StoredObject] = []
        self._failures: list[ObjectFailure] = []

    def run(self) -> InventoryResult:
        """Scan the store and return decoded objects in path order.

        Raises:
            InventoryError: In fail-fast mode, on the first failing object.
            ObjectReadError: If the objects directory cannot be listed.
        """
        object_paths = list_object_paths(self._options.repo_root)
        for object_path in object_paths:
            self._scan_path(object_path)
        result = InventoryResult(objects=tuple(self._objects), failures=tuple(self._failures))
        _LOGGER.info(
            "inventory_scan_completed",
            repo_root=str(self._options.repo_root),
            object_count=len(result.objects),
            failure_count=len(result.failures),
        )
        return result

    def _scan_path(self, object_path: Path) -> None:
        try:
            stored_object = read_object(
                read_object_file(object_path),
                source=str(object_path),
                strict_types=self._options.strict_types,
            )
        except InventoryError as error:
            if self._options.error_policy != ERROR_POLICY_COLLECT:
                raise
            self._record_failure(object_path, error)
            return
        expected_id = object_id_from_path(object_path)
        if stored_object.digest != expected_id:
            _LOGGER.warning(
                "object_digest_mismatch",
                path=str(object_path),
                expected=expected_id,
                digest=stored_object.digest,
            )
        self._objects.append(stored_object)

    def _record_failure(self, object_path: Path, error: InventoryError) -> None:
        failure = ObjectFailure(
            path=str(object_path),
            error_type=type(error).__name__,
            message=str(error),
        )
        _LOGGER.error(
            "object_failed",
            path=failure.path,
            error_type=failure.error_type,
            message=failure.message,
        )
        self._failures.append(failure)


def scan_inventory(options: ScanOptions) -> InventoryResult:
    """Run a full inventory scan.

    Args:
        options: Scan options.

    Returns:
        Decoded objects and, in collect mode, per-object failures.
    """
    return InventoryScanRunner(options).run()
