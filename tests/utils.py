import math

from fractype import Fraction


def assert_canonical(frac: Fraction):
    """Valid, positive denominator, fully reduced and zero as 0/1"""
    assert frac.valid()
    assert frac.denominator > 0
    if frac.numerator == 0:
        assert frac.denominator == 1
    else:
        assert math.gcd(abs(frac.numerator), frac.denominator) == 1


def sample_fractions() -> list[Fraction]:
    return [
        Fraction(1, 2),
        Fraction(-2, 3),
        Fraction(5),
        Fraction(0),
        Fraction(7, -12),
        Fraction(144, 60),
        Fraction("-3.75"),
    ]


def chained_ops(op):
    def _once(x, y):
        return op(x, y)

    def _chained(x, y):
        return op(op(op(op(x, y), y), x), y)

    return [
        _once,
        _chained,
    ]
