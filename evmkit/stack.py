"""Bounded stack of 256-bit words."""

from __future__ import annotations

from evmkit.words import _ensure_word

STACK_LIMIT = 1024


class StackError(Exception):
    """Base class for stack failures."""


class StackUnderflowError(StackError):
    """Raised when an operation needs more items than the stack holds."""


class StackOverflowError(StackError):
    """Raised when a push would exceed the stack limit."""


class Stack:
    """Machine stack of at most ``STACK_LIMIT`` words; index 0 is the bottom."""

    def __init__(self) -> None:
        self._data: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._data == other._data

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._data) + "]"

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def data(self) -> list[int]:
        """Return a copy of the stack contents, bottom first."""
        return list(self._data)

    def _require(self, count: int) -> None:
        if len(self._data) < count:
            raise StackUnderflowError(
                f"need {count} items, stack holds {len(self._data)}"
            )

    def _require_room(self) -> None:
        if len(self._data) + 1 > STACK_LIMIT:
            raise StackOverflowError(f"stack limit of {STACK_LIMIT} reached")

    def reduce_one(self) -> None:
        """Discard the top item."""
        self._require(1)
        self._data.pop()

    def pop(self) -> int:
        """Remove and return the top item."""
        self._require(1)
        return self._data.pop()

    def push(self, value: int) -> None:
        """Push a word."""
        value = _ensure_word(value)
        self._require_room()
        self._data.append(value)

    def push_b256(self, value: bytes) -> None:
        """Push a 32-byte big-endian value."""
        if len(value) != 32:
            raise ValueError(f"expected 32 bytes, got {len(value)}")
        self._require_room()
        self._data.append(int.from_bytes(value, "big"))

    def peek(self, no_from_top: int) -> int:
        """Return the item ``no_from_top`` places below the top (0 is the top)."""
        if no_from_top < 0:
            raise ValueError("position must be non-negative")
        self._require(no_from_top + 1)
        return self._data[-1 - no_from_top]

    def set(self, no_from_top: int, value: int) -> None:
        """Replace the item ``no_from_top`` places below the top."""
        if no_from_top < 0:
            raise ValueError("position must be non-negative")
        value = _ensure_word(value)
        self._require(no_from_top + 1)
        self._data[-1 - no_from_top] = value

    def dup(self, n: int) -> None:
        """Push a copy of the ``n``-th item from the top (1 is the top)."""
        if n < 1:
            raise ValueError("dup depth must be at least 1")
        self._require(n)
        self._require_room()
        self._data.append(self._data[-n])

    def swap(self, n: int) -> None:
        """Exchange the top item with the one ``n`` places below it."""
        if n < 1:
            raise ValueError("swap depth must be at least 1")
        self._require(n + 1)
        data = self._data
        data[-1], data[-1 - n] = data[-1 - n], data[-1]

    def push_slice(self, data: bytes) -> None:
        """Push up to 32 bytes read as a big-endian word."""
        if len(data) > 32:
            raise ValueError(f"slice of {len(data)} bytes exceeds a word")
        self._require_room()
        self._data.append(int.from_bytes(data, "big"))