"""256-bit machine words and their two's complement signed interpretation."""

from __future__ import annotations

from enum import Enum

WORD_BITS = 256
U256_MAX = (1 << WORD_BITS) - 1
U64_MAX = (1 << 64) - 1
SIGN_BIT_MASK = (1 << (WORD_BITS - 1)) - 1
MIN_NEGATIVE_VALUE = 1 << (WORD_BITS - 1)


class Sign(Enum):
    """Sign of a word read as a signed 256-bit integer."""

    PLUS = "plus"
    MINUS = "minus"
    ZERO = "zero"


def _ensure_word(value: int) -> int:
    """Return ``value`` unchanged if it is an unsigned 256-bit word."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"word must be an int, not {type(value).__name__}")
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"value {value} does not fit in an unsigned 256-bit word")
    return value


def i256_sign(value: int) -> Sign:
    """Return the sign of ``value`` read as a signed 256-bit integer."""
    value = _ensure_word(value)
    if value & MIN_NEGATIVE_VALUE:
        return Sign.MINUS
    return Sign.ZERO if value == 0 else Sign.PLUS


def two_compl(value: int) -> int:
    """Return the two's complement negation of ``value``, wrapping at 256 bits."""
    return -_ensure_word(value) & U256_MAX


def _magnitude(value: int, sign: Sign) -> int:
    return two_compl(value) if sign is Sign.MINUS else value


def i256_cmp(first: int, second: int) -> int:
    """Compare two words as signed integers; return -1, 0 or 1."""
    first_sign = i256_sign(first)
    second_sign = i256_sign(second)
    if first_sign is second_sign:
        if first == second:
            return 0
        return -1 if first < second else 1
    order = {Sign.MINUS: 0, Sign.ZERO: 1, Sign.PLUS: 2}
    return -1 if order[first_sign] < order[second_sign] else 1


def i256_div(first: int, second: int) -> int:
    """Signed division truncated toward zero; division by zero gives zero."""
    first = _ensure_word(first)
    second_sign = i256_sign(second)
    if second_sign is Sign.ZERO:
        return 0
    first_sign = i256_sign(first)
    first_mag = _magnitude(first, first_sign)
    second_mag = _magnitude(second, second_sign)

    if (
        first_sign is Sign.MINUS
        and first_mag == MIN_NEGATIVE_VALUE
        and second_mag == 1
    ):
        return two_compl(MIN_NEGATIVE_VALUE)

    quotient = (first_mag // second_mag) & SIGN_BIT_MASK
    if quotient == 0:
        return 0
    if (first_sign is Sign.MINUS) != (second_sign is Sign.MINUS):
        return two_compl(quotient)
    return quotient


def i256_mod(first: int, second: int) -> int:
    """Signed remainder taking the sign of ``first``.

    A zero ``first`` gives zero; a zero ``second`` otherwise raises
    ``ZeroDivisionError``.
    """
    first_sign = i256_sign(first)
    if first_sign is Sign.ZERO:
        return 0
    second_sign = i256_sign(second)
    first_mag = _magnitude(first, first_sign)
    second_mag = _magnitude(second, second_sign)

    remainder = (first_mag % second_mag) & SIGN_BIT_MASK
    if remainder == 0:
        return 0
    return two_compl(remainder) if first_sign is Sign.MINUS else remainder


def as_u64_saturated(value: int) -> int:
    """Return ``value`` clamped to the largest unsigned 64-bit integer."""
    value = _ensure_word(value)
    return U64_MAX if value > U64_MAX else value


def as_usize_saturated(value: int) -> int:
    """Return ``value`` clamped to a 64-bit machine size."""
    return as_u64_saturated(value)


def as_usize_checked(value: int) -> int:
    """Return ``value`` as a 64-bit machine size, raising ``OverflowError`` if it does not fit."""
    value = _ensure_word(value)
    if value > U64_MAX:
        raise OverflowError(f"value {value} does not fit in 64 bits")
    return value