"""Inventory CLI entry points.

This module exposes the scan command for a repository root.
It maps argparse options onto config overrides and SDK calls.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from core.config import InventoryConfig
from core.constants import (
    ERROR_POLICY_COLLECT,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_OUTPUT_FORMATS,
)
from core.errors import InventoryError
from core.logging_config import configure_logging
from store.inventory_sdk import InventoryClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="inventory",
        description="Decode and list every loose object in a repository",
    )
    parser.add_argument("repo_root", help="Repository working tree or bare repository path")
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=SUPPORTED_OUTPUT_FORMATS,
        help="Override INVENTORY_OUTPUT_FORMAT for this command",
    )
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Collect per-object failures instead of stopping at the first one",
    )
    parser.add_argument(
        "--strict-types",
        action="store_true",
        help="Reject header types other than blob, tree, commit, and tag",
    )
    parser.add_argument(
        "--log-level",
        choices=SUPPORTED_LOG_LEVELS,
        help="Override INVENTORY_LOG_LEVEL for this command",
    )
    parser.add_argument("--output", help="Write the inventory to this file instead of stdout")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the inventory CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        client = InventoryClient(_build_config(args))
        configure_logging(client.config.log_level)
        result = client.scan(args.repo_root)
        document = client.render(result)
    except InventoryError as error:
        print(f"inventory_error={error}", file=sys.stderr)
        return 1
    _emit_document(document, args.output)
    for failure in result.failures:
        print(f"object_error={failure.path}: {failure.message}", file=sys.stderr)
    return 0 if result.succeeded else 1


def _build_config(args: argparse.Namespace) -> InventoryConfig:
    """Build config with CLI overrides applied.

    Args:
        args: Parsed CLI args.

    Returns:
        Effective runtime config.
    """
    config = InventoryConfig.from_env()
    if args.output_format:
        config = replace(config, output_format=args.output_format)
    if args.keep_going:
        config = replace(config, error_policy=ERROR_POLICY_COLLECT)
    if args.strict_types:
        config = replace(config, strict_types=True)
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    return config


def _emit_document(document: str, output: str | None) -> None:
    if output is None:
        print(document)
        return
    output_path = Path(output).expanduser()
    output_path.write_text(document + "\n", encoding="utf-8")
    print(output_path)
