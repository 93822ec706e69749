from __future__ import annotations

import fractions
from typing import Union

import numpy as np


# Integer kinds accepted as numerator or denominator
IntegerLike = Union[
    int,
    np.integer,
]

# Binary floating point kinds, converted through their decimal text form
FloatLike = Union[
    float,
    np.floating,
]

BoolLike = Union[
    bool,
    np.bool_,
]

# Everything that can be mixed with a Fraction in arithmetic and comparisons
NumberLike = Union[
    bool,
    np.bool_,
    int,
    np.integer,
    float,
    np.floating,
    fractions.Fraction,
]

# Everything a Fraction can be constructed from (besides another Fraction)
FractionInput = Union[
    NumberLike,
    str,
]
