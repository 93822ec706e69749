from __future__ import annotations

import logging

import numpy as np

from fractype.core import flags
from fractype.core.constants import DECIMAL_DELIMITERS, INT64_MAX, MAX_FRACTION_DIGITS, MAX_INTEGER_DIGITS
from fractype.core.integers import IntegerOverflowError
from fractype.core.typing import FloatLike

logger = logging.getLogger(__name__)


def is_digit(c: str) -> bool:
    # str.isdigit would also accept non-ascii digits like "²"
    return "0" <= c <= "9"


def is_delimiter(c: str) -> bool:
    return c in DECIMAL_DELIMITERS


def isnumber(text: str) -> bool:
    """
    Tests if the text is a decimal number: an optional leading minus, digits and at most one
    decimal delimiter ("." or ","), which must be followed by at least one digit. Runs in O(n).

    Args:
        text (str): text that may represent a number

    Returns:
        bool: True if text can be parsed by ``split_decimal``
    """
    if text.startswith("-"):
        text = text[1:]
    if not text:
        return False
    if not is_digit(text[0]) or is_delimiter(text[-1]):
        return False
    num_delimiters = 0
    for c in text:
        if is_delimiter(c):
            num_delimiters += 1
            if num_delimiters > 1:
                return False
        elif not is_digit(c):
            return False
    return True


def split_decimal(text: str) -> tuple[bool, str, str]:
    """
    Splits a validated decimal number into its parts.

    Args:
        text (str): text for which ``isnumber`` holds

    Returns:
        tuple[bool, str, str]: sign flag (True if negative), integer digits and fractional digits. The
            fractional digits are empty for whole numbers and truncated to MAX_FRACTION_DIGITS.
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    int_digits, frac_digits = text, ""
    for idx, c in enumerate(text):
        if is_delimiter(c):
            int_digits, frac_digits = text[:idx], text[idx + 1:]
            break
    if len(frac_digits) > MAX_FRACTION_DIGITS:
        logger.debug(
            "Truncating %d fractional digits of %s to %d", len(frac_digits), text, MAX_FRACTION_DIGITS
        )
        frac_digits = frac_digits[:MAX_FRACTION_DIGITS]
    return negative, int_digits, frac_digits


def digits_to_int(digits: str) -> int:
    """
    Reads a string of ASCII digits of any length. Values beyond INT64_MAX saturate at INT64_MAX,
    like C's strtoll does.

    Args:
        digits (str): digits as returned by ``split_decimal``

    Raises:
        IntegerOverflowError: if the value does not fit into int64 and flags.CHECK_OVERFLOW is set

    Returns:
        int: the value, at most INT64_MAX
    """
    significant = digits.lstrip("0") or "0"
    if len(significant) <= MAX_INTEGER_DIGITS and int(significant) <= INT64_MAX:
        return int(significant)
    if flags.CHECK_OVERFLOW:
        raise IntegerOverflowError(f"Integer text with {len(significant)} digits does not fit into int64")
    logger.debug("Integer text with %d digits saturated to %d", len(significant), INT64_MAX)
    return INT64_MAX


def float_to_text(value: FloatLike) -> str:
    """
    Renders a binary floating point number as positional decimal text with the fewest digits that
    still round-trip in the precision of its own type (e.g. float32 0.1 renders as "0.1").
    Non-finite values render as "inf", "-inf" or "nan".
    """
    return np.format_float_positional(value, unique=True, trim="-")
