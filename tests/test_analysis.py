import pytest
from hypothesis import given
from hypothesis import strategies as st

from evmkit.analysis import analyze
from evmkit.opcode import JUMPDEST, PUSH1, PUSH32, STOP


def test_single_jumpdest():
    jump_map = analyze(bytes([JUMPDEST]))
    assert jump_map.is_valid(0)
    assert len(jump_map) == 1


def test_jumpdest_inside_push_data_is_invalid():
    jump_map = analyze(bytes([PUSH1, JUMPDEST, JUMPDEST]))
    assert not jump_map.is_valid(0)
    assert not jump_map.is_valid(1)
    assert jump_map.is_valid(2)


def test_push32_skips_all_immediates():
    code = bytes([PUSH32]) + bytes([JUMPDEST]) * 32 + bytes([JUMPDEST])
    jump_map = analyze(code)
    assert not any(jump_map.is_valid(i) for i in range(33))
    assert jump_map.is_valid(33)


def test_truncated_push_at_end():
    jump_map = analyze(bytes([PUSH32, JUMPDEST]))
    assert not jump_map.is_valid(1)
    assert len(jump_map) == 2


def test_empty_code():
    jump_map = analyze(b"")
    assert len(jump_map) == 0
    assert not jump_map.is_valid(0)


@pytest.mark.parametrize("position", [-1, 3, 100])
def test_out_of_range_positions(position):
    jump_map = analyze(bytes([JUMPDEST, STOP, JUMPDEST]))
    assert not jump_map.is_valid(position)


@given(st.binary(max_size=200))
def test_valid_positions_hold_jumpdest(code):
    jump_map = analyze(code)
    assert len(jump_map) == len(code)
    for position in range(len(code)):
        if jump_map.is_valid(position):
            assert code[position] == JUMPDEST


@given(st.integers(min_value=0, max_value=64))
def test_plain_jumpdests_all_valid(count):
    jump_map = analyze(bytes([JUMPDEST]) * count)
    assert all(jump_map.is_valid(i) for i in range(count))
    assert len(jump_map) == count