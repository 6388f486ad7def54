from __future__ import annotations

import math
import types
from typing import Final

__all__ = ("SCALAR_TYPES", "is_scalar", "literal")

#: Types that are rendered directly as python literals. We do exact type
#: comparisons instead of calls to `isinstance` to avoid running into problems
#: with inheritance.
SCALAR_TYPES: Final = (bool, int, float, str, bytes, types.NoneType)

NAN: Final = 'float("nan")'
INFINITY: Final = 'float("inf")'


def is_scalar(value: object) -> bool:
    return type(value) in SCALAR_TYPES


def literal(constant: int | float | None | str | bytes | bool) -> str:
    """Render a scalar as a python literal.

    >>> literal(None), literal(-0.0), literal(b"a")
    ('None', '-0.0', "b'a'")
    >>> literal(float("-inf"))
    '-float("inf")'
    """
    if isinstance(constant, float) and not math.isfinite(constant):
        if math.isnan(constant):
            return NAN
        if constant == math.inf:
            return INFINITY
        assert constant == -math.inf
        return "-" + INFINITY
    return repr(constant)
