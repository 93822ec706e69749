import numpy as np

"""Bounds of the fixed-width signed integer range all numerators and denominators live in"""

INT64_MIN: int = int(np.iinfo(np.int64).min)
INT64_MAX: int = int(np.iinfo(np.int64).max)

"""Characters accepted as the decimal separator when parsing text"""
DECIMAL_DELIMITERS: tuple[str, ...] = (".", ",")

"""
Maximum number of fractional digits kept when parsing decimal text. 10**18 is the
largest power of ten that fits into int64, further digits are truncated.
"""
MAX_FRACTION_DIGITS: int = 18

"""
Number of decimal digits of INT64_MAX. Integer text with more significant digits cannot fit into
int64 and is never converted digit by digit.
"""
MAX_INTEGER_DIGITS: int = len(str(INT64_MAX))
