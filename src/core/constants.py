"""Core constants used across inventory modules.

This module centralizes object-store layout and format constants.
Keeping values here avoids magic literals in decoding logic.
"""

from __future__ import annotations

GIT_DIR_NAME = ".git"
OBJECTS_DIR_NAME = "objects"
OBJECT_DIR_NAME_LENGTH = 2
OBJECT_FILE_NAME_LENGTH = 38
HEX_DIGITS = frozenset("0123456789abcdef")
DIGEST_ALGORITHM = "sha1"
DIGEST_LENGTH = 20
HEADER_FIELD_SEPARATOR = b" "
NULL_BYTE = b"\x00"
KNOWN_OBJECT_TYPES = ("blob", "tree", "commit", "tag")
ERROR_POLICY_FAIL_FAST = "fail-fast"
ERROR_POLICY_COLLECT = "collect"
SUPPORTED_ERROR_POLICIES = (ERROR_POLICY_FAIL_FAST, ERROR_POLICY_COLLECT)
DEFAULT_ERROR_POLICY = ERROR_POLICY_FAIL_FAST
SUPPORTED_OUTPUT_FORMATS = ("json", "yaml")
DEFAULT_OUTPUT_FORMAT = "json"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL = "warning"
