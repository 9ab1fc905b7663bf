"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from tests.object_fixtures import build_raw_object, build_tree_entry, write_loose_object


@pytest.fixture(autouse=True)
def _clear_inventory_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "INVENTORY_ERROR_POLICY",
        "INVENTORY_STRICT_TYPES",
        "INVENTORY_OUTPUT_FORMAT",
        "INVENTORY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_cli_prints_json_inventory(tmp_path: Path, capsys) -> None:
    """CLI should print one JSON row per object."""
    write_loose_object(tmp_path, build_raw_object("blob", b"hello"))

    exit_code = main([str(tmp_path)])
    rows = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and rows[0]["Type"] == "blob" and rows[0]["Content"] == "hello"


def test_cli_prints_tree_files(tmp_path: Path, capsys) -> None:
    """CLI should render tree entries under Files."""
    digest = bytes(range(20))
    write_loose_object(
        tmp_path, build_raw_object("tree", build_tree_entry("100644", "a.txt", digest))
    )

    exit_code = main([str(tmp_path)])
    rows = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and rows[0]["Content"]["Files"] == [
        {"Name": "a.txt", "Mode": "100644", "Hash": digest.hex()}
    ]


def test_cli_reports_error_and_returns_one(tmp_path: Path, capsys) -> None:
    """CLI should print a diagnostic and no inventory on failure."""
    exit_code = main([str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1 and captured.out == "" and "inventory_error=" in captured.err


def test_cli_keep_going_emits_partial_inventory(tmp_path: Path, capsys) -> None:
    """Keep-going should print decoded objects and exit one."""
    write_loose_object(tmp_path, build_raw_object("blob", b"hello"))
    bad_path = tmp_path / ".git" / "objects" / "00" / ("0" * 38)
    bad_path.parent.mkdir(parents=True)
    bad_path.write_bytes(b"broken")

    exit_code = main([str(tmp_path), "--keep-going"])
    captured = capsys.readouterr()

    assert exit_code == 1 and len(json.loads(captured.out)) == 1 and (
        "object_error=" in captured.err
    )


def test_cli_strict_types_rejects_unknown_type(tmp_path: Path, capsys) -> None:
    """Strict types should turn unknown headers into a failure."""
    write_loose_object(tmp_path, build_raw_object("widget", b"x"))

    exit_code = main([str(tmp_path), "--strict-types"])

    assert exit_code == 1 and "Unknown object type" in capsys.readouterr().err


def test_cli_writes_output_file(tmp_path: Path, capsys) -> None:
    """Output option should write the document and print its path."""
    write_loose_object(tmp_path, build_raw_object("blob", b"hello"))
    output_path = tmp_path / "inventory.json"

    exit_code = main([str(tmp_path), "--output", str(output_path)])

    assert exit_code == 0 and capsys.readouterr().out.strip() == str(output_path) and (
        json.loads(output_path.read_text(encoding="utf-8"))[0]["Size"] == 5
    )
