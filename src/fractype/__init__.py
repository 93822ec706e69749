from fractype.core import flags
from fractype.core.constants import INT64_MAX, INT64_MIN
from fractype.core.fraction import Fraction
from fractype.core.integers import IntegerOverflowError, gcd, lcm
from fractype.core.parsing import isnumber


__all__ = [
    "Fraction",
    "flags",
    "gcd",
    "lcm",
    "isnumber",
    "IntegerOverflowError",
    "INT64_MIN",
    "INT64_MAX",
]
