import pytest
from hypothesis import given
from hypothesis import strategies as st

from evmkit.words import (
    MIN_NEGATIVE_VALUE,
    SIGN_BIT_MASK,
    U64_MAX,
    U256_MAX,
    Sign,
    as_u64_saturated,
    as_usize_checked,
    as_usize_saturated,
    i256_cmp,
    i256_div,
    i256_mod,
    i256_sign,
    two_compl,
)

words = st.integers(min_value=0, max_value=U256_MAX)
nonzero_words = st.integers(min_value=1, max_value=U256_MAX)


def test_div_i256_source_cases():
    one = 1
    one_hundred = 100
    fifty = 50
    two = 2
    neg_one_hundred = 100
    minus_one = 1
    max_value = 2**255 - 1
    neg_max_value = 2**255 - 1

    assert i256_div(MIN_NEGATIVE_VALUE, minus_one) == MIN_NEGATIVE_VALUE
    assert i256_div(MIN_NEGATIVE_VALUE, one) == MIN_NEGATIVE_VALUE
    assert i256_div(max_value, one) == max_value
    assert i256_div(max_value, minus_one) == neg_max_value
    assert i256_div(one_hundred, minus_one) == neg_one_hundred
    assert i256_div(one_hundred, two) == fifty


def test_div_min_negative_by_true_minus_one_wraps():
    assert i256_div(MIN_NEGATIVE_VALUE, two_compl(1)) == MIN_NEGATIVE_VALUE


def test_div_by_negative_one_negates():
    assert i256_div(100, two_compl(1)) == two_compl(100)


def test_div_by_zero_is_zero():
    assert i256_div(100, 0) == 0


@given(words, nonzero_words)
def test_div_and_mod_recombine(a, b):
    q = i256_div(a, b)
    r = i256_mod(a, b)
    assert (q * b + r) & U256_MAX == a


@given(words)
def test_two_compl_is_involution(x):
    assert two_compl(two_compl(x)) == x


def test_two_compl_of_one_is_all_ones():
    assert two_compl(1) == U256_MAX


def test_sign():
    assert i256_sign(0) is Sign.ZERO
    assert i256_sign(SIGN_BIT_MASK) is Sign.PLUS
    assert i256_sign(MIN_NEGATIVE_VALUE) is Sign.MINUS
    assert i256_sign(U256_MAX) is Sign.MINUS


@given(words, words)
def test_cmp_antisymmetric(a, b):
    assert i256_cmp(a, b) == -i256_cmp(b, a)


@given(words)
def test_cmp_reflexive(a):
    assert i256_cmp(a, a) == 0


def test_cmp_orders_by_sign():
    assert i256_cmp(U256_MAX, 0) == -1
    assert i256_cmp(MIN_NEGATIVE_VALUE, SIGN_BIT_MASK) == -1
    assert i256_cmp(1, 0) == 1
    assert i256_cmp(MIN_NEGATIVE_VALUE, U256_MAX) == -1


def test_mod_takes_sign_of_dividend():
    assert i256_mod(two_compl(7), 2) == two_compl(1)
    assert i256_mod(7, two_compl(2)) == 1


def test_mod_zero_dividend_is_zero():
    assert i256_mod(0, 0) == 0


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        i256_mod(5, 0)


def test_saturation():
    assert as_u64_saturated(5) == 5
    assert as_u64_saturated(U64_MAX + 1) == U64_MAX
    assert as_usize_saturated(U256_MAX) == U64_MAX


def test_checked_conversion():
    assert as_usize_checked(U64_MAX) == U64_MAX
    with pytest.raises(OverflowError):
        as_usize_checked(U64_MAX + 1)


@pytest.mark.parametrize("bad", [-1, U256_MAX + 1])
def test_out_of_range_word_rejected(bad):
    with pytest.raises(ValueError):
        i256_sign(bad)