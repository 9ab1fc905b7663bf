"""Unit tests for stored object assembly."""

from __future__ import annotations

import json
import zlib

import pytest

from core.errors import CorruptObjectError, MalformedHeaderError, UnknownObjectTypeError
from core.logging_config import configure_logging
from core.types import DirectoryContent, OpaqueContent, StoredObject
from objects.assembler import assemble_object, read_object
from tests.object_fixtures import build_raw_object, build_tree_entry, sha1_hex

_DIGEST = bytes(range(20))


def test_read_object_decodes_blob() -> None:
    """A compressed blob should assemble into opaque content."""
    raw = b"blob 5\x00hello"

    stored_object = read_object(zlib.compress(raw))

    assert stored_object == StoredObject(
        object_type="blob",
        size=5,
        digest=sha1_hex(raw),
        content=OpaqueContent(data=b"hello"),
    )


def test_assemble_object_decodes_tree() -> None:
    """A tree buffer should assemble into directory content."""
    raw = build_raw_object("tree", build_tree_entry("100644", "file.txt", _DIGEST), size=27)

    stored_object = assemble_object(raw)

    assert isinstance(stored_object.content, DirectoryContent) and (
        stored_object.size == 27 and stored_object.content.entries[0].hash == _DIGEST.hex()
    )


def test_assemble_object_digest_matches_recomputed_hash() -> None:
    """Digest should equal an independent hash of the decompressed bytes."""
    raw = build_raw_object("commit", b"tree " + b"a" * 40 + b"\n\nmessage\n")

    stored_object = assemble_object(raw)

    assert stored_object.digest == sha1_hex(raw)


def test_assemble_object_keeps_declared_size() -> None:
    """Declared size should be stored even when it differs from the payload."""
    raw = build_raw_object("blob", b"hello", size=99)

    assert assemble_object(raw).size == 99


def test_assemble_object_keeps_unknown_type() -> None:
    """Unknown type tokens should be kept when not strict."""
    stored_object = assemble_object(build_raw_object("widget", b"x"))

    assert stored_object.object_type == "widget" and not stored_object.is_known_type


def test_assemble_object_rejects_unknown_type_when_strict() -> None:
    """Strict mode should reject unknown type tokens."""
    with pytest.raises(UnknownObjectTypeError):
        assemble_object(build_raw_object("widget", b"x"), strict_types=True)


def test_assemble_object_rejects_missing_size() -> None:
    """Header without size must not produce an object."""
    with pytest.raises(MalformedHeaderError):
        assemble_object(b"blob\x00hello")


def test_read_object_rejects_truncated_input() -> None:
    """Truncated compressed data should not produce an object."""
    compressed = zlib.compress(b"blob 5\x00hello")

    with pytest.raises(CorruptObjectError):
        read_object(compressed[:-4])


def test_assemble_object_warns_on_unknown_type(capsys) -> None:
    """Unknown type tokens should emit a warning event."""
    configure_logging("warning")

    assemble_object(build_raw_object("widget", b"x"))
    event = json.loads(capsys.readouterr().err)

    assert (event["event"], event["object_type"], event["level"]) == (
        "object_type_unknown",
        "widget",
        "warning",
    )


def test_assemble_object_drops_trailing_null_for_unknown_type() -> None:
    """Unknown opaque objects should not keep a trailing null byte."""
    stored_object = assemble_object(b"widget 4\x00abc\x00")

    assert stored_object.content == OpaqueContent(data=b"abc")
