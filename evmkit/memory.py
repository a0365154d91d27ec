"""Byte-addressed, growable machine memory."""

from __future__ import annotations

from evmkit.words import U64_MAX, _ensure_word

WORD_SIZE = 32


def next_multiple_of_32(x: int) -> int | None:
    """Round ``x`` up to a multiple of 32.

    Returns ``None`` when the result would not fit in 64 bits.
    """
    if x < 0:
        raise ValueError("x must be non-negative")
    rounded = (x + 31) & ~31
    if rounded > U64_MAX:
        return None
    return rounded


class Memory:
    """Linear memory backed by a ``bytearray``.

    Callers are expected to resize memory before touching a region; every
    access outside the current size raises ``IndexError``.
    """

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Memory(len={len(self._data)})"

    @property
    def effective_len(self) -> int:
        """Number of bytes currently in use."""
        return len(self._data)

    def data(self) -> bytes:
        """Return a copy of the whole memory."""
        return bytes(self._data)

    def resize(self, new_size: int) -> None:
        """Grow (zero-filled) or shrink memory to ``new_size`` bytes."""
        if new_size < 0:
            raise ValueError("memory size must be non-negative")
        current = len(self._data)
        if new_size > current:
            self._data.extend(bytes(new_size - current))
        else:
            del self._data[new_size:]

    def _check_range(self, offset: int, size: int) -> None:
        if offset < 0 or size < 0 or offset + size > len(self._data):
            raise IndexError(
                f"range {offset}..{offset + size} outside memory of {len(self._data)} bytes"
            )

    def get_slice(self, offset: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``offset``."""
        self._check_range(offset, size)
        return bytes(self._data[offset : offset + size])

    def set_byte(self, index: int, byte: int) -> None:
        """Store a single byte at ``index``."""
        self._check_range(index, 1)
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"byte {byte} out of range")
        self._data[index] = byte

    def set_u256(self, index: int, value: int) -> None:
        """Store a 256-bit word big-endian at ``index``."""
        self._check_range(index, WORD_SIZE)
        self._data[index : index + WORD_SIZE] = _ensure_word(value).to_bytes(
            WORD_SIZE, "big"
        )

    def set(self, offset: int, value: bytes) -> None:
        """Copy ``value`` into memory at ``offset``."""
        if not value:
            return
        self._check_range(offset, len(value))
        self._data[offset : offset + len(value)] = value

    def set_data(
        self, memory_offset: int, data_offset: int, length: int, data: bytes
    ) -> None:
        """Copy ``length`` bytes of ``data`` from ``data_offset`` into memory.

        Bytes past the end of ``data`` are written as zeros.
        """
        self._check_range(memory_offset, length)
        end = memory_offset + length
        if data_offset >= len(data):
            self._data[memory_offset:end] = bytes(length)
            return
        data_end = min(data_offset + length, len(data))
        copied_end = memory_offset + (data_end - data_offset)
        self._data[memory_offset:copied_end] = data[data_offset:data_end]
        self._data[copied_end:end] = bytes(end - copied_end)