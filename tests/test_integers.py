import pytest

from fractype.core import flags
from fractype.core.constants import INT64_MAX, INT64_MIN
from fractype.core.integers import (
    INVALID_PARTS,
    IntegerOverflowError,
    add,
    bound,
    gcd,
    lcm,
    mul,
    neg,
    normalize,
    trunc_div,
    wrap,
)


def test_int64_bounds():
    """Bounds match the signed 64 bit range"""
    assert INT64_MAX == 2**63 - 1
    assert INT64_MIN == -(2**63)


def test_wrap_two_complement():
    """Values outside int64 wrap around like fixed-width integers"""
    assert wrap(INT64_MAX + 1) == INT64_MIN
    assert wrap(INT64_MIN - 1) == INT64_MAX
    assert wrap(2**64) == 0
    assert wrap(-1) == -1
    assert wrap(12345) == 12345


def test_bound_wraps_by_default():
    """Without overflow checking, bound silently wraps"""
    assert bound(INT64_MAX) == INT64_MAX
    assert add(INT64_MAX, 1) == INT64_MIN
    assert mul(2**62, 4) == 0
    assert neg(INT64_MIN) == INT64_MIN


def test_bound_checked_raises(monkeypatch):
    """With overflow checking, leaving the range raises"""
    monkeypatch.setattr(flags, "CHECK_OVERFLOW", True)
    assert bound(INT64_MIN) == INT64_MIN
    with pytest.raises(IntegerOverflowError):
        add(INT64_MAX, 1)
    with pytest.raises(OverflowError):
        mul(2**62, 4)
    with pytest.raises(IntegerOverflowError):
        neg(INT64_MIN)


def test_trunc_div_rounds_toward_zero():
    """Integer division truncates toward zero like C, not toward negative infinity"""
    assert trunc_div(7, 2) == 3
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3
    assert trunc_div(6, 3) == 2


def test_gcd():
    """Euclidean gcd on non-negative integers"""
    assert gcd(12, 18) == 6
    assert gcd(18, 12) == 6
    assert gcd(17, 5) == 1
    assert gcd(0, 5) == 5
    assert gcd(5, 0) == 5
    assert gcd(0, 0) == 0


def test_lcm():
    """lcm is always non-negative"""
    assert lcm(4, 6) == 12
    assert lcm(2, 3) == 6
    assert lcm(7, 7) == 7
    assert lcm(0, 5) == 0
    assert lcm(-4, 6) == 12


def test_lcm_of_two_zeros_is_a_precondition_violation():
    """lcm(0, 0) divides by zero"""
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


def test_normalize_reduces():
    """Pairs are reduced by their gcd with the sign on the numerator"""
    assert normalize(4, 2) == (2, 1, True)
    assert normalize(3, -6) == (-1, 2, True)
    assert normalize(-3, -6) == (1, 2, True)
    assert normalize(-10, 4) == (-5, 2, True)


def test_normalize_fast_paths():
    """Zero numerator and unit denominator skip the gcd"""
    assert normalize(0, -5) == (0, 1, True)
    assert normalize(0, 7) == (0, 1, True)
    assert normalize(-9, 1) == (-9, 1, True)


def test_normalize_zero_denominator():
    """A zero denominator gives the invalid pair"""
    assert normalize(5, 0) == INVALID_PARTS
    assert normalize(0, 0) == (0, 0, False)


def test_normalize_int64_min():
    """The magnitude of INT64_MIN is reduced before it is bounded"""
    assert normalize(INT64_MIN, 2) == (-(2**62), 1, True)
    assert normalize(INT64_MIN, 3) == (INT64_MIN, 3, True)


def test_normalize_out_of_range_input(monkeypatch):
    """Out of range inputs wrap, or raise when overflow checking is on"""
    assert normalize(2**64 + 3, 1) == (3, 1, True)
    monkeypatch.setattr(flags, "CHECK_OVERFLOW", True)
    with pytest.raises(IntegerOverflowError):
        normalize(2**64 + 3, 1)


def test_normalize_denominator_two_to_the_63():
    """A reduced denominator of 2**63 has no positive int64 form and gives the invalid pair"""
    assert normalize(1, INT64_MIN) == INVALID_PARTS
    assert normalize(-3, INT64_MIN) == INVALID_PARTS
    assert normalize(2, INT64_MIN) == (-1, 2**62, True)
    assert normalize(1, -(2**62)) == (-1, 2**62, True)


def test_normalize_denominator_two_to_the_63_checked(monkeypatch):
    """The invalid pair is returned instead of raising when overflow checking is on"""
    monkeypatch.setattr(flags, "CHECK_OVERFLOW", True)
    assert normalize(1, INT64_MIN) == INVALID_PARTS
