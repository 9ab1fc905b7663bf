"""Forward-only reader over an in-memory byte buffer."""

from __future__ import annotations

from core.constants import NULL_BYTE


class ByteCursor:
    """Stateful cursor that consumes a buffer left to right."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = data
        self._offset = offset

    @property
    def offset(self) -> int:
        """Current read position."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._offset

    def at_end(self) -> bool:
        """Return whether every byte has been consumed."""
        return self._offset >= len(self._data)

    def read_until_null(self) -> bytes | None:
        """Read bytes up to the next null and consume the null.

        Returns:
            Bytes before the null, or None when no null remains.
            The cursor does not move when None is returned.
        """
        null_index = self._data.find(NULL_BYTE, self._offset)
        if null_index < 0:
            return None
        chunk = self._data[self._offset:null_index]
        self._offset = null_index + 1
        return chunk

    def read_exact(self, length: int) -> bytes | None:
        """Read exactly ``length`` bytes, nulls included.

        Returns:
            The bytes read, or None when fewer than ``length`` remain.
            The cursor does not move when None is returned.
        """
        if self.remaining < length:
            return None
        chunk = self._data[self._offset:self._offset + length]
        self._offset += length
        return chunk
