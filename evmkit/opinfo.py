"""Static per-opcode information: base gas and control-flow flags."""

from __future__ import annotations

from dataclasses import dataclass

JUMP_MASK = 0x80000000
GAS_BLOCK_END_MASK = 0x40000000
IS_PUSH_MASK = 0x20000000
GAS_MASK = 0x1FFFFFFF


def _check_gas(gas: int) -> int:
    if not isinstance(gas, int) or isinstance(gas, bool):
        raise TypeError(f"gas must be an int, not {type(gas).__name__}")
    if not 0 <= gas <= GAS_MASK:
        raise ValueError(f"gas {gas} does not fit in {GAS_MASK.bit_length()} bits")
    return gas


@dataclass(frozen=True)
class OpInfo:
    """Opcode information packed into 32 bits.

    The layout is ``IS_JUMP (1 bit) | IS_GAS_BLOCK_END (1 bit) | IS_PUSH (1 bit) | gas (29 bits)``.
    """

    data: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.data, int) or isinstance(self.data, bool):
            raise TypeError(f"data must be an int, not {type(self.data).__name__}")
        if not 0 <= self.data <= 0xFFFFFFFF:
            raise ValueError(f"data {self.data} does not fit in 32 bits")

    def is_jump(self) -> bool:
        """Whether the opcode is a jump destination."""
        return self.data & JUMP_MASK == JUMP_MASK

    def is_gas_block_end(self) -> bool:
        """Whether the opcode ends a block of statically priced instructions."""
        return self.data & GAS_BLOCK_END_MASK == GAS_BLOCK_END_MASK

    def is_push(self) -> bool:
        """Whether the opcode pushes immediate data."""
        return self.data & IS_PUSH_MASK == IS_PUSH_MASK

    def gas(self) -> int:
        """Static gas cost of the opcode."""
        return self.data & GAS_MASK

    @classmethod
    def none(cls) -> OpInfo:
        """Information for an undefined opcode."""
        return cls(0)

    @classmethod
    def block_end(cls, gas: int) -> OpInfo:
        """An opcode costing ``gas`` that ends a gas block."""
        return cls(_check_gas(gas) | GAS_BLOCK_END_MASK)

    @classmethod
    def dynamic(cls) -> OpInfo:
        """An opcode whose cost is worked out while it runs."""
        return cls(0)

    @classmethod
    def with_gas(cls, gas: int) -> OpInfo:
        """An ordinary opcode costing ``gas``."""
        return cls(_check_gas(gas))

    @classmethod
    def jumpdest(cls) -> OpInfo:
        """The jump destination marker, which also ends a gas block."""
        return cls(JUMP_MASK | GAS_BLOCK_END_MASK)