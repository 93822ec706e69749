from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np
from plum import NotFoundLookupError

from fractype.core import flags
from fractype.core.integers import (
    INVALID_PARTS,
    IntegerOverflowError,
    add,
    gcd,
    lcm,
    mul,
    neg,
    normalize,
    sub,
    trunc_div,
    wrap,
)
from fractype.core.parsing import digits_to_int, float_to_text, isnumber, split_decimal
from fractype.core.typing import FloatLike, FractionInput, IntegerLike
from fractype.functional.construct import fraction_parts, number_parts

logger = logging.getLogger(__name__)

Parts = tuple[int, int, bool]


class Fraction:
    """Exact rational number with numerator and denominator bounded to int64.

    Every valid Fraction is kept in reduced form with a positive denominator, zero is always 0/1.
    Undefined results, like a division by zero, are represented by the invalid fraction 0/0 for which
    ``valid()`` is False. No arithmetic error is ever raised, check ``valid()`` instead.

    Examples:
        >>> Fraction(1, 2) + Fraction(1, 3)
        Fraction(5/6)
        >>> Fraction("3.14")
        Fraction(157/50)
        >>> Fraction(1, 0).valid()
        False
    """

    __slots__ = ("_num", "_den", "_valid")

    def __init__(
        self,
        value: FractionInput | Fraction = 0,
        denominator: IntegerLike | None = None,
    ) -> None:
        if denominator is not None:
            if not isinstance(value, IntegerLike) or not isinstance(denominator, IntegerLike):
                raise TypeError(
                    f"Numerator and denominator must be integers, got {type(value)} and {type(denominator)}"
                )
            self._assign(lambda: normalize(int(value), int(denominator)))
            return
        if isinstance(value, Fraction):
            self._num, self._den, self._valid = value.parts
            return
        try:
            self._assign(lambda: fraction_parts(value))
        except NotFoundLookupError as e:
            raise TypeError(f"Cannot construct Fraction from {type(value)}") from e

    @classmethod
    def _from_parts(cls, parts: Parts) -> Fraction:
        result = cls.__new__(cls)
        result._num, result._den, result._valid = parts
        return result

    @classmethod
    def invalid(cls) -> Fraction:
        """The invalid fraction 0/0, the result of any operation without a defined value."""
        return cls._from_parts(INVALID_PARTS)

    @classmethod
    def from_text(cls, text: str) -> Fraction:
        """
        Parses a decimal number like "-3.14" or "2,5" exactly, without going through binary floating point.

        Args:
            text (str): optional minus, digits and at most one "." or "," followed by digits

        Returns:
            Fraction: the parsed value, or the invalid fraction if text is not a decimal number. Integer
                digits beyond int64 saturate at INT64_MAX, or give the invalid fraction when
                flags.CHECK_OVERFLOW is set.
        """
        if not isnumber(text):
            logger.debug("%r is not a decimal number, result is invalid", text)
            return cls.invalid()
        negative, int_digits, frac_digits = split_decimal(text)
        try:
            whole = digits_to_int(int_digits)
        except IntegerOverflowError as e:
            logger.debug("%s, result is invalid", e)
            return cls.invalid()
        result = cls(whole, 1)
        if frac_digits:
            result += cls(int(frac_digits), 10 ** len(frac_digits))
        if negative:
            result *= -1
        return result

    @classmethod
    def from_float(cls, value: FloatLike) -> Fraction:
        if not isinstance(value, FloatLike):
            raise TypeError(f"Expected a floating point number, got {type(value)}")
        return cls(value)

    ## state ####################################
    def _assign(self, compute: Callable[[], Parts]) -> Fraction:
        try:
            parts = compute()
        except IntegerOverflowError as e:
            logger.debug("%s, result is invalid", e)
            parts = INVALID_PARTS
        self._num, self._den, self._valid = parts
        return self

    def _absorbs(self, other: Fraction | None = None) -> bool:
        if not flags.PROPAGATE_INVALID:
            return False
        return not self._valid or (other is not None and not other._valid)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @property
    def parts(self) -> Parts:
        """Tuple of numerator, denominator and validity."""
        return self._num, self._den, self._valid

    def valid(self) -> bool:
        return self._valid

    def copy(self) -> Fraction:
        return Fraction._from_parts(self.parts)

    def __copy__(self) -> Fraction:
        return self.copy()

    ## conversions ##############################
    def __int__(self) -> int:
        if not self._valid:
            raise ValueError("Cannot convert invalid Fraction to integer")
        return trunc_div(self._num, self._den)

    def __float__(self) -> float:
        if self._den == 0:
            return float("nan")
        return self._num / self._den

    def __bool__(self) -> bool:
        return self._num != 0

    def astype(self, dtype: Any) -> np.generic:
        """
        Converts to a numpy scalar. Integer dtypes truncate toward zero (and wrap if the dtype is
        narrower than int64), floating dtypes divide in their own precision.
        """
        dtype = np.dtype(dtype)
        if dtype.kind in "iu":
            return np.int64(int(self)).astype(dtype)
        if dtype.kind == "f":
            if self._den == 0:
                return dtype.type(np.nan)
            return dtype.type(self._num) / dtype.type(self._den)
        if dtype.kind == "b":
            return np.bool_(bool(self))
        raise TypeError(f"Cannot convert Fraction to {dtype}")

    def f_str(self) -> str:
        return f"{self._num}/{self._den}"

    def __str__(self) -> str:
        return float_to_text(float(self))

    def __call__(self) -> str:
        return str(self)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(float(self), format_spec)

    def __repr__(self) -> str:
        if not self._valid:
            return "Fraction(invalid)"
        return f"Fraction({self.f_str()})"

    ## arithmetic ###############################
    def _apply(self, compute: Callable[[Fraction], Parts], other: Any) -> Fraction:
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        if self._absorbs(rhs):
            return self._assign(lambda: INVALID_PARTS)
        return self._assign(lambda: compute(rhs))

    def __iadd__(self, other: Any) -> Fraction:
        return self._apply(
            lambda rhs: normalize(
                add(mul(self._num, rhs._den), mul(rhs._num, self._den)),
                mul(self._den, rhs._den),
            ),
            other,
        )

    def __isub__(self, other: Any) -> Fraction:
        return self._apply(
            lambda rhs: normalize(
                sub(mul(self._num, rhs._den), mul(rhs._num, self._den)),
                mul(self._den, rhs._den),
            ),
            other,
        )

    def __imul__(self, other: Any) -> Fraction:
        return self._apply(
            lambda rhs: normalize(mul(self._num, rhs._num), mul(self._den, rhs._den)),
            other,
        )

    def __itruediv__(self, other: Any) -> Fraction:
        return self._apply(
            lambda rhs: normalize(mul(self._num, rhs._den), mul(self._den, rhs._num)),
            other,
        )

    def __add__(self, other: Any) -> Fraction:
        return self.copy().__iadd__(other)

    def __sub__(self, other: Any) -> Fraction:
        return self.copy().__isub__(other)

    def __mul__(self, other: Any) -> Fraction:
        return self.copy().__imul__(other)

    def __truediv__(self, other: Any) -> Fraction:
        return self.copy().__itruediv__(other)

    def __radd__(self, other: Any) -> Fraction:
        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return lhs.__iadd__(self)

    def __rsub__(self, other: Any) -> Fraction:
        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return lhs.__isub__(self)

    def __rmul__(self, other: Any) -> Fraction:
        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return lhs.__imul__(self)

    def __rtruediv__(self, other: Any) -> Fraction:
        lhs = _as_operand(other)
        if lhs is None:
            return NotImplemented
        return lhs.__itruediv__(self)

    def __pos__(self) -> Fraction:
        return self.copy()

    def __neg__(self) -> Fraction:
        result = self.copy()
        if self._absorbs():
            return result
        return result._assign(lambda: normalize(neg(self._num), self._den))

    def increment(self, postfix: bool = False) -> Fraction:
        """
        Adds one in place.

        Args:
            postfix (bool, optional): If True, return a copy of the value before incrementing.
                Otherwise return the incremented fraction itself. Defaults to False.
        """
        previous = self.copy() if postfix else self
        if not self._absorbs():
            self._assign(lambda: normalize(add(self._num, self._den), self._den))
        return previous

    def decrement(self, postfix: bool = False) -> Fraction:
        """Subtracts one in place, see ``increment``."""
        previous = self.copy() if postfix else self
        if not self._absorbs():
            self._assign(lambda: normalize(sub(self._num, self._den), self._den))
        return previous

    def invert(self) -> Fraction:
        """Returns the reciprocal. Zero has none and gives the invalid fraction."""
        return self.copy().invert_inplace()

    def invert_inplace(self) -> Fraction:
        if self._absorbs():
            return self
        return self._assign(lambda: normalize(self._den, self._num))

    def pow(self, exponent: IntegerLike) -> Fraction:
        """
        Raises to an integer power by repeated multiplication. A negative exponent inverts first.
        The exponent 0 gives one for every valid fraction (also for zero).

        Args:
            exponent (IntegerLike): integer exponent, other numbers are not supported

        Returns:
            Fraction: self ** exponent
        """
        if not isinstance(exponent, IntegerLike):
            raise TypeError(f"Exponent must be an integer, got {type(exponent)}")
        exponent = int(exponent)
        if self._absorbs():
            return self.copy()
        if exponent == 0:
            return Fraction(1)
        if exponent < 0:
            return self.invert().pow(-exponent)
        result = self.copy()
        for _ in range(1, exponent):
            result *= self
        return result

    def __pow__(self, exponent: Any, modulo: None = None) -> Fraction:
        if modulo is not None or not isinstance(exponent, IntegerLike):
            return NotImplemented
        return self.pow(exponent)

    def __ipow__(self, exponent: Any) -> Fraction:
        if not isinstance(exponent, IntegerLike):
            return NotImplemented
        result = self.pow(exponent)
        self._num, self._den, self._valid = result.parts
        return self

    ## comparison ###############################
    def _reduced(self) -> tuple[int, int]:
        divisor = gcd(abs(self._num), abs(self._den))
        return self._num // divisor, self._den // divisor

    def _scaled_numerators(self, other: Fraction) -> tuple[int, int]:
        multiple = lcm(self._den, other._den)
        if flags.CHECK_OVERFLOW:
            # comparisons cannot become invalid, so they are computed exactly instead
            return self._num * (multiple // self._den), other._num * (multiple // other._den)
        multiple = wrap(multiple)
        return (
            wrap(self._num * trunc_div(multiple, self._den)),
            wrap(other._num * trunc_div(multiple, other._den)),
        )

    def __eq__(self, other: Any) -> bool:
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        if self._absorbs(rhs):
            return False
        if self._num == 0 or rhs._num == 0:
            return self._num == rhs._num
        return self._reduced() == rhs._reduced()

    def __lt__(self, other: Any) -> bool:
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        if not (self._valid and rhs._valid):
            return False
        left, right = self._scaled_numerators(rhs)
        return left < right

    def __gt__(self, other: Any) -> bool:
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        if not (self._valid and rhs._valid):
            return False
        left, right = self._scaled_numerators(rhs)
        return left > right

    def __le__(self, other: Any) -> bool:
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        if self._absorbs(rhs):
            return False
        return not self.__gt__(rhs)

    def __ge__(self, other: Any) -> bool:
        rhs = _as_operand(other)
        if rhs is None:
            return NotImplemented
        if self._absorbs(rhs):
            return False
        return not self.__lt__(rhs)


def _as_operand(value: Any) -> Fraction | None:
    """Passes a Fraction through as is and converts other supported numbers, None if unsupported."""
    if isinstance(value, Fraction):
        return value
    try:
        return Fraction._from_parts(number_parts(value))
    except NotFoundLookupError:
        return None
    except IntegerOverflowError as e:
        logger.debug("%s, operand is invalid", e)
        return Fraction.invalid()
