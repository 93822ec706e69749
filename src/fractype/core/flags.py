"""Global behaviour switches. They are read at call time, so changing them affects all subsequent operations.

CHECK_OVERFLOW: If True, an int64 overflow in any intermediate product turns the result into the invalid
    fraction. Otherwise values silently wrap around like fixed-width two's complement integers.
PROPAGATE_INVALID: If True, the invalid fraction absorbs every operator (including ``x ** 0``). If False,
    operators compute on the raw 0/0 pair, which only re-triggers the invalid state where a zero denominator
    reaches normalization.
EXACT_FLOAT_CONVERSION: If True, floats are decomposed exactly via ``as_integer_ratio``. Otherwise they are
    rendered to their shortest decimal text and parsed.
"""

CHECK_OVERFLOW: bool = False
PROPAGATE_INVALID: bool = True
EXACT_FLOAT_CONVERSION: bool = False
