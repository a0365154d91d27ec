# evmkit

The core pieces of an Ethereum Virtual Machine interpreter, in plain Python
with no third-party dependencies. Words are ordinary Python `int`s holding
unsigned 256-bit values; functions that take words raise `TypeError` for a
non-`int` and `ValueError` for a value outside `0 .. 2**256 - 1`.

## What is inside

- `evmkit.words`: two's-complement helpers on 256-bit words: the `Sign`
  enum (`PLUS`, `MINUS`, `ZERO`), `i256_sign`, `two_compl`, `i256_cmp`
  (returns -1, 0 or 1), `i256_div` (truncates toward zero, division by zero
  gives 0) and `i256_mod` (result takes the sign of the dividend; raises
  `ZeroDivisionError` for a zero divisor unless the dividend is zero).
  Operand conversions: `as_u64_saturated` and `as_usize_saturated` clamp to
  `2**64 - 1`; `as_usize_checked` raises `OverflowError` instead.
- `evmkit.arithmetic`: the pure semantics of the arithmetic, comparison and
  bitwise opcodes: `wrapping_add`, `wrapping_mul`, `wrapping_sub`, `div`,
  `sdiv`, `rem`, `smod`, `addmod`, `mulmod`, `exp`, `signextend`, `lt`, `gt`,
  `slt`, `sgt`, `eq`, `iszero`, `bitand`, `bitor`, `bitxor`, `bitnot`,
  `byte`, `shl`, `shr`, `sar`. Division and modulo by zero give 0;
  comparisons return 1 or 0.
- `evmkit.memory`: `Memory`, a byte-addressed memory backed by a
  `bytearray`, with `resize`, `get_slice`, `set_byte`, `set_u256`, `set`,
  `set_data` (zero-fills past the end of the source data), `data()`,
  `effective_len` and `len()`. Any access outside the current size raises
  `IndexError`. `next_multiple_of_32` rounds a size up to a multiple of 32,
  returning `None` if the result would not fit in 64 bits.
- `evmkit.stack`: `Stack`, limited to `STACK_LIMIT` (1024) words, with
  `push`, `push_b256`, `push_slice`, `pop`, `reduce_one`, `peek`, `set`,
  `dup`, `swap` and `data()`. Failures raise `StackUnderflowError` or
  `StackOverflowError`, both subclasses of `StackError`.
- `evmkit.opcode`: a constant for every opcode byte, `OPCODE_JUMPMAP` (the
  mnemonic of each of the 256 byte values, or `None`), and `OpCode`, an
  opcode byte with `try_from_u8`, `as_str` and a `str()` form that reads
  `UNKNOWN(0x..)` for undefined bytes.
- `evmkit.opinfo`: `OpInfo`, a per-opcode record packing a jump flag, a
  gas-block-end flag, a push flag and a 29-bit static gas cost into 32 bits,
  built with `none`, `with_gas`, `block_end`, `dynamic` and `jumpdest`.
- `evmkit.analysis`: `analyze`, which finds the `JUMPDEST` positions of
  bytecode that are not inside push data and returns a `JumpMap` with
  `is_valid(position)`.

## What it does not do

There is no instruction loop: nothing fetches and executes bytecode, keeps a
program counter or charges gas. There is no per-fork gas table, no account or
storage state, no calls or contract creation, and no hashing for `KECCAK256`.
The package supplies the word arithmetic, stack, memory, opcode names and
jump analysis that such an interpreter is built from.

## Installing

```
pip install .
pip install ".[test]"   # with the test tools
```

## Examples

```python
from evmkit.arithmetic import sdiv, sar, wrapping_sub
from evmkit.words import two_compl

minus_one = two_compl(1)
assert wrapping_sub(0, 1) == minus_one
assert sdiv(100, minus_one) == two_compl(100)
assert sar(4, two_compl(32)) == two_compl(2)
```

```python
from evmkit.stack import Stack, StackUnderflowError

stack = Stack()
stack.push(1)
stack.push(2)
stack.swap(1)
assert stack.pop() == 1
try:
    stack.dup(5)
except StackUnderflowError:
    pass
```

```python
from evmkit.memory import Memory, next_multiple_of_32

memory = Memory()
memory.resize(next_multiple_of_32(40))   # 64 bytes
memory.set_u256(0, 0xFF)
assert memory.get_slice(31, 1) == b"\xff"
```

```python
from evmkit.analysis import analyze
from evmkit.opcode import OpCode

jumps = analyze(bytes([0x60, 0x5B, 0x5B]))   # PUSH1 0x5b; JUMPDEST
assert not jumps.is_valid(1) and jumps.is_valid(2)
assert str(OpCode.try_from_u8(0x5B)) == "JUMPDEST"
```

## Running the tests

```
pytest
```