"""Bytecode analysis: finding valid jump destinations."""

from __future__ import annotations

from dataclasses import dataclass

from evmkit.opcode import JUMPDEST, PUSH1


@dataclass(frozen=True)
class JumpMap:
    """Set of valid jump destinations within a piece of code."""

    destinations: frozenset[int]
    length: int

    def is_valid(self, position: int) -> bool:
        """Whether ``position`` is a JUMPDEST outside push data."""
        return 0 <= position < self.length and position in self.destinations

    def __len__(self) -> int:
        return self.length


def analyze(code: bytes) -> JumpMap:
    """Scan ``code`` and record every JUMPDEST that is not push data."""
    destinations: set[int] = set()
    position = 0
    end = len(code)
    while position < end:
        op = code[position]
        if op == JUMPDEST:
            destinations.add(position)
            position += 1
            continue
        push_size = (op - PUSH1) & 0xFF
        position += push_size + 2 if push_size < 32 else 1
    return JumpMap(frozenset(destinations), end)