"""Python SDK for object store inventories.

This module exposes high-level APIs for scanning a repository
and rendering its decoded loose objects.
"""

from __future__ import annotations

from pathlib import Path

from core.config import InventoryConfig
from core.types import InventoryResult, ScanOptions, StoredObject
from store.inventory_payload import render_inventory
from store.inventory_scan import scan_inventory


class InventoryClient:
    """Primary SDK entry point for inventory workflows."""

    def __init__(self, config: InventoryConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or InventoryConfig.from_env()

    @property
    def config(self) -> InventoryConfig:
        """Runtime configuration used by this client."""
        return self._config

    def build_options(self, repo_root: str | Path) -> ScanOptions:
        """Build scan options for a repository from client config."""
        return ScanOptions(
            repo_root=Path(repo_root).expanduser(),
            error_policy=self._config.error_policy,
            strict_types=self._config.strict_types,
        )

    def scan(self, repo_root: str | Path) -> InventoryResult:
        """Decode every loose object under a repository.

        Args:
            repo_root: Working tree root or bare repository directory.

        Returns:
            Scan result with objects in path order.

        Raises:
            InventoryError: On the first failure in fail-fast mode.
        """
        return scan_inventory(self.build_options(repo_root))

    def objects(self, repo_root: str | Path) -> list[StoredObject]:
        """Return decoded objects, dropping failure rows."""
        return list(self.scan(repo_root).objects)

    def render(self, result: InventoryResult) -> str:
        """Render scan objects in the configured output format."""
        return render_inventory(result.objects, self._config.output_format)
