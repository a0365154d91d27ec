import pytest
from hypothesis import given, strategies as st

from evmkit import opcode
from evmkit.opcode import OPCODE_JUMPMAP, OpCode


def test_every_byte_has_a_name():
    names = [OpCode(code).as_str() for code in range(256)]
    assert len(names) == 256
    assert names[0x00] == "STOP"
    assert names[0xFF] == "SELFDESTRUCT"
    assert names[0x0C] == "unknown"
    assert names.count("unknown") == sum(entry is None for entry in OPCODE_JUMPMAP)


@pytest.mark.parametrize(
    "code, name",
    [
        (opcode.STOP, "STOP"),
        (opcode.ADD, "ADD"),
        (opcode.SHA3, "KECCAK256"),
        (opcode.PUSH0, "PUSH0"),
        (opcode.PUSH32, "PUSH32"),
        (opcode.SELFDESTRUCT, "SELFDESTRUCT"),
        (opcode.STATICCALL, "STATICCALL"),
    ],
)
def test_known_names(code, name):
    op = OpCode.try_from_u8(code)
    assert op is not None
    assert op.as_str() == name
    assert str(op) == name
    assert int(op) == code


@pytest.mark.parametrize("code", [0x0C, 0x21, 0x49, 0x5C, 0xA5, 0xEF, 0xFB])
def test_undefined_bytes_are_rejected(code):
    assert OpCode.try_from_u8(code) is None
    assert OPCODE_JUMPMAP[code] is None


def test_unknown_formatting():
    op = OpCode(0x0C)
    assert op.as_str() == "unknown"
    assert str(op) == "UNKNOWN(0x0c)"


@given(st.integers(min_value=0, max_value=255))
def test_try_from_agrees_with_map(code):
    op = OpCode.try_from_u8(code)
    if OPCODE_JUMPMAP[code] is None:
        assert op is None
    else:
        assert op == OpCode(code)
        assert op.as_str() == OPCODE_JUMPMAP[code]
        assert str(op) == op.as_str()


@pytest.mark.parametrize("n", range(1, 33))
def test_push_family(n):
    assert OpCode(opcode.PUSH1 + n - 1).as_str() == f"PUSH{n}"


@pytest.mark.parametrize("n", range(1, 17))
def test_dup_and_swap_families(n):
    assert OpCode(opcode.DUP1 + n - 1).as_str() == f"DUP{n}"
    assert OpCode(opcode.SWAP1 + n - 1).as_str() == f"SWAP{n}"


@pytest.mark.parametrize("n", range(5))
def test_log_family(n):
    assert OpCode(opcode.LOG0 + n).as_str() == f"LOG{n}"


@pytest.mark.parametrize("code", [-1, 256])
def test_out_of_range_byte(code):
    with pytest.raises(ValueError):
        OpCode.try_from_u8(code)
    with pytest.raises(ValueError):
        OpCode(code)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        OpCode("ADD")


def test_equality_by_value():
    assert OpCode(opcode.MUL) == OpCode.try_from_u8(opcode.MUL)
    assert OpCode(opcode.MUL) != OpCode(opcode.ADD)