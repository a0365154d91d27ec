"""Arithmetic, comparison and bitwise operations on 256-bit words."""

from __future__ import annotations

from evmkit.words import (
    U256_MAX,
    WORD_BITS,
    Sign,
    _ensure_word,
    as_usize_saturated,
    i256_cmp,
    i256_div,
    i256_mod,
    i256_sign,
    two_compl,
)


def wrapping_add(a: int, b: int) -> int:
    """Return ``a + b`` modulo 2**256."""
    return (_ensure_word(a) + _ensure_word(b)) & U256_MAX


def wrapping_mul(a: int, b: int) -> int:
    """Return ``a * b`` modulo 2**256."""
    return (_ensure_word(a) * _ensure_word(b)) & U256_MAX


def wrapping_sub(a: int, b: int) -> int:
    """Return ``a - b`` modulo 2**256."""
    return (_ensure_word(a) - _ensure_word(b)) & U256_MAX


def div(a: int, b: int) -> int:
    """Unsigned division; division by zero gives zero."""
    a, b = _ensure_word(a), _ensure_word(b)
    return a // b if b else 0


def sdiv(a: int, b: int) -> int:
    """Signed division truncated toward zero; division by zero gives zero."""
    return i256_div(a, b)


def rem(a: int, b: int) -> int:
    """Unsigned remainder; a zero modulus gives zero."""
    a, b = _ensure_word(a), _ensure_word(b)
    return a % b if b else 0


def smod(a: int, b: int) -> int:
    """Signed remainder; a zero modulus gives zero."""
    _ensure_word(a)
    if _ensure_word(b) == 0:
        return 0
    return i256_mod(a, b)


def addmod(a: int, b: int, n: int) -> int:
    """Return ``(a + b) % n`` without intermediate wrapping; zero if ``n`` is zero."""
    a, b, n = _ensure_word(a), _ensure_word(b), _ensure_word(n)
    return (a + b) % n if n else 0


def mulmod(a: int, b: int, n: int) -> int:
    """Return ``(a * b) % n`` without intermediate wrapping; zero if ``n`` is zero."""
    a, b, n = _ensure_word(a), _ensure_word(b), _ensure_word(n)
    return (a * b) % n if n else 0


def exp(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` modulo 2**256."""
    return pow(_ensure_word(base), _ensure_word(exponent), 1 << WORD_BITS)


def signextend(byte_index: int, value: int) -> int:
    """Extend the sign of the low ``byte_index + 1`` bytes of ``value`` to the full word."""
    byte_index, value = _ensure_word(byte_index), _ensure_word(value)
    if byte_index >= 32:
        return value
    bit_index = 8 * byte_index + 7
    mask = (1 << bit_index) - 1
    if (value >> bit_index) & 1:
        return value | (U256_MAX ^ mask)
    return value & mask


def lt(a: int, b: int) -> int:
    """Return 1 if ``a < b`` unsigned, else 0."""
    return int(_ensure_word(a) < _ensure_word(b))


def gt(a: int, b: int) -> int:
    """Return 1 if ``a > b`` unsigned, else 0."""
    return int(_ensure_word(a) > _ensure_word(b))


def slt(a: int, b: int) -> int:
    """Return 1 if ``a < b`` as signed integers, else 0."""
    return int(i256_cmp(a, b) < 0)


def sgt(a: int, b: int) -> int:
    """Return 1 if ``a > b`` as signed integers, else 0."""
    return int(i256_cmp(a, b) > 0)


def eq(a: int, b: int) -> int:
    """Return 1 if the words are equal, else 0."""
    return int(_ensure_word(a) == _ensure_word(b))


def iszero(a: int) -> int:
    """Return 1 if the word is zero, else 0."""
    return int(_ensure_word(a) == 0)


def bitand(a: int, b: int) -> int:
    """Bitwise AND."""
    return _ensure_word(a) & _ensure_word(b)


def bitor(a: int, b: int) -> int:
    """Bitwise OR."""
    return _ensure_word(a) | _ensure_word(b)


def bitxor(a: int, b: int) -> int:
    """Bitwise XOR."""
    return _ensure_word(a) ^ _ensure_word(b)


def bitnot(a: int) -> int:
    """Bitwise NOT within 256 bits."""
    return U256_MAX ^ _ensure_word(a)


def byte(index: int, value: int) -> int:
    """Return byte ``index`` of ``value`` counted from the most significant end."""
    offset = as_usize_saturated(index)
    value = _ensure_word(value)
    if offset >= 32:
        return 0
    return ((value << (8 * offset)) & U256_MAX) >> (8 * 31)


def shl(shift: int, value: int) -> int:
    """Logical shift left, dropping bits beyond 256."""
    amount = as_usize_saturated(shift)
    value = _ensure_word(value)
    if amount >= WORD_BITS:
        return 0
    return (value << amount) & U256_MAX


def shr(shift: int, value: int) -> int:
    """Logical shift right."""
    amount = as_usize_saturated(shift)
    value = _ensure_word(value)
    if amount >= WORD_BITS:
        return 0
    return value >> amount


def sar(shift: int, value: int) -> int:
    """Arithmetic shift right, rounding toward negative infinity."""
    shift = _ensure_word(shift)
    sign = i256_sign(value)
    if value == 0 or shift >= WORD_BITS:
        return two_compl(1) if sign is Sign.MINUS else 0
    if sign is not Sign.MINUS:
        return value >> shift
    magnitude = two_compl(value)
    shifted = (((magnitude - 1) & U256_MAX) >> shift) + 1
    return two_compl(shifted & U256_MAX)