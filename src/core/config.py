"""Runtime configuration model for the inventory.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_ERROR_POLICY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    SUPPORTED_ERROR_POLICIES,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_OUTPUT_FORMATS,
)
from core.errors import InventoryConfigError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class InventoryConfig:
    """Validated runtime configuration.

    Attributes:
        error_policy: ``fail-fast`` aborts on first failure, ``collect`` continues.
        strict_types: Reject header type tokens outside the known object types.
        output_format: Rendering format for the inventory document.
        log_level: Minimum structured log level.
    """

    error_policy: str
    strict_types: bool
    output_format: str
    log_level: str

    @classmethod
    def from_env(cls) -> "InventoryConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            InventoryConfigError: If environment values are invalid.
        """
        error_policy = _parse_choice(
            "INVENTORY_ERROR_POLICY",
            os.getenv("INVENTORY_ERROR_POLICY", DEFAULT_ERROR_POLICY),
            SUPPORTED_ERROR_POLICIES,
        )
        strict_types = _parse_flag(
            "INVENTORY_STRICT_TYPES", os.getenv("INVENTORY_STRICT_TYPES", "")
        )
        output_format = _parse_choice(
            "INVENTORY_OUTPUT_FORMAT",
            os.getenv("INVENTORY_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT),
            SUPPORTED_OUTPUT_FORMATS,
        )
        log_level = _parse_choice(
            "INVENTORY_LOG_LEVEL",
            os.getenv("INVENTORY_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            SUPPORTED_LOG_LEVELS,
        )
        return cls(
            error_policy=error_policy,
            strict_types=strict_types,
            output_format=output_format,
            log_level=log_level,
        )


def _parse_choice(name: str, raw_value: str, choices: tuple[str, ...]) -> str:
    """Parse an enumerated environment value.

    Args:
        name: Environment variable name for error context.
        raw_value: Raw string from environment.
        choices: Accepted lowercase values.

    Returns:
        Normalized value.

    Raises:
        InventoryConfigError: If value is not one of the choices.
    """
    value = raw_value.strip().lower()
    if value not in choices:
        raise InventoryConfigError(
            f"Invalid {name} value: expected one of {', '.join(choices)}, "
            f"got '{raw_value}'. Set {name} to a supported value."
        )
    return value


def _parse_flag(name: str, raw_value: str) -> bool:
    """Parse a boolean environment flag.

    Args:
        name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed boolean.

    Raises:
        InventoryConfigError: If value is not a recognized boolean.
    """
    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InventoryConfigError(
        f"Invalid {name} value: expected a boolean flag, got '{raw_value}'. "
        f"Set {name} to 1 or 0."
    )
