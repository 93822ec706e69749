from __future__ import annotations

import logging

from fractype.core import flags
from fractype.core.constants import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

_RANGE = INT64_MAX - INT64_MIN + 1

# (numerator, denominator, valid)
ZERO_PARTS: tuple[int, int, bool] = (0, 1, True)
INVALID_PARTS: tuple[int, int, bool] = (0, 0, False)


class IntegerOverflowError(OverflowError):
    """Raised by the bounded integer primitives when overflow checking is enabled."""


def wrap(x: int) -> int:
    """Wraps an arbitrary integer into int64 like two's complement arithmetic would."""
    return (x - INT64_MIN) % _RANGE + INT64_MIN


def bound(x: int) -> int:
    """
    Forces an exactly computed integer into the int64 range.

    Args:
        x (int): exact result of an integer operation

    Raises:
        IntegerOverflowError: if x does not fit and flags.CHECK_OVERFLOW is set

    Returns:
        int: x itself if it fits, otherwise the wrapped value
    """
    if INT64_MIN <= x <= INT64_MAX:
        return x
    if flags.CHECK_OVERFLOW:
        raise IntegerOverflowError(f"{x} does not fit into int64")
    wrapped = wrap(x)
    logger.debug("int64 overflow, %d wrapped to %d", x, wrapped)
    return wrapped


def add(a: int, b: int) -> int:
    return bound(a + b)


def sub(a: int, b: int) -> int:
    return bound(a - b)


def mul(a: int, b: int) -> int:
    return bound(a * b)


def neg(a: int) -> int:
    # -INT64_MIN does not fit and wraps back to itself
    return bound(-a)


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, unlike ``//`` which floors."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by the iterative Euclidean algorithm.

    Both arguments have to be non-negative, this is not checked.
    """
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Least common multiple, always non-negative. Arguments have to be non-negative and must not
    both be zero. The product is not bounded, callers are responsible for the int64 range.
    """
    return (abs(a) // gcd(a, b)) * abs(b)


def normalize(numerator: int, denominator: int) -> tuple[int, int, bool]:
    """
    Brings a raw numerator/denominator pair into canonical form: the denominator is positive, both
    are divided by their gcd and zero is 0/1. A zero denominator gives the invalid pair 0/0, as
    does a reduced denominator of 2**63, which has no positive int64 representation.

    Args:
        numerator (int): raw numerator
        denominator (int): raw denominator

    Raises:
        IntegerOverflowError: if an input does not fit into int64 and flags.CHECK_OVERFLOW is set

    Returns:
        tuple[int, int, bool]: numerator, denominator and validity
    """
    numerator, denominator = bound(numerator), bound(denominator)
    if denominator == 0:
        logger.debug("Zero denominator for numerator %d, result is invalid", numerator)
        return INVALID_PARTS
    if numerator == 0:
        return ZERO_PARTS
    if denominator == 1:
        return numerator, 1, True

    sign = 1
    if numerator < 0:
        sign = -sign
    if denominator < 0:
        sign = -sign
    # abs(INT64_MIN) leaves the range, so the magnitudes are only bounded after dividing by the gcd
    numerator, denominator = abs(numerator), abs(denominator)
    divisor = gcd(numerator, denominator)
    numerator, denominator = numerator // divisor, denominator // divisor
    if denominator > INT64_MAX:
        # 2**63 would wrap to a negative denominator
        logger.debug("Denominator %d does not fit into int64, result is invalid", denominator)
        return INVALID_PARTS
    return bound(sign * numerator), denominator, True
