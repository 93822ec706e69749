# ruff: noqa: F811
import fractions
import logging

import numpy as np
from plum import dispatch, overload

from fractype.core import flags
from fractype.core.constants import INT64_MAX
from fractype.core.integers import INVALID_PARTS, ZERO_PARTS, normalize
from fractype.core.parsing import float_to_text
from fractype.core.typing import NumberLike

logger = logging.getLogger(__name__)


## number_parts #############################
# Operands that may be mixed with a Fraction in arithmetic and comparisons.
@overload
def number_parts(value: int | np.integer) -> tuple[int, int, bool]:
    return normalize(int(value), 1)


@overload
def number_parts(value: np.unsignedinteger) -> tuple[int, int, bool]:
    # unsigned values above the signed range saturate instead of wrapping
    return normalize(min(int(value), INT64_MAX), 1)


@overload
def number_parts(value: float | np.floating) -> tuple[int, int, bool]:
    if not flags.EXACT_FLOAT_CONVERSION:
        return fraction_parts(float_to_text(value))
    if not np.isfinite(value):
        logger.debug("Non-finite float %s, result is invalid", value)
        return INVALID_PARTS
    num, den = value.as_integer_ratio()
    return normalize(num, den)


@overload
def number_parts(value: fractions.Fraction) -> tuple[int, int, bool]:
    return normalize(value.numerator, value.denominator)


@dispatch
def number_parts(value) -> tuple[int, int, bool]:
    del value
    raise NotImplementedError()


## fraction_parts ###########################
# Everything a Fraction can be constructed from.
@overload
def fraction_parts(value: bool) -> tuple[int, int, bool]:
    # True is a valid zero, False the invalid fraction
    return ZERO_PARTS if value else INVALID_PARTS


@overload
def fraction_parts(value: np.bool_) -> tuple[int, int, bool]:
    return ZERO_PARTS if value else INVALID_PARTS


@overload
def fraction_parts(value: str) -> tuple[int, int, bool]:
    from fractype.core.fraction import Fraction

    return Fraction.from_text(value).parts


@overload
def fraction_parts(value: NumberLike) -> tuple[int, int, bool]:
    return number_parts(value)


@dispatch
def fraction_parts(value) -> tuple[int, int, bool]:
    del value
    raise NotImplementedError()
