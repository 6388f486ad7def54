from __future__ import annotations

import enum
from typing import Final

__all__ = (
    "Option",
    "ADD_TYPE_HINTS",
    "SKIP_DYNAMIC_PROPERTIES",
    "NO_REDUCE",
    "NO_SETSTATE",
    "NOT_ANY_OBJECT",
    "NO_GLOBALS",
    "ADD_IMPORTS",
    "INLINE_SCALAR_LIST",
    "TRAILING_COMMA",
)


class Option(enum.Flag):
    """Flags controlling :func:`~varexport.export`

    Flags can be combined with ``|``.
    """

    #: Wrap the objects rebuilt from their fields in ``typing.cast(Cls, ...)``
    ADD_TYPE_HINTS = enum.auto()

    #: Only export the fields declared on the class (``__slots__``, dataclass
    #: fields and annotations).
    SKIP_DYNAMIC_PROPERTIES = enum.auto()

    #: Do not rebuild objects via their reduce function.
    NO_REDUCE = enum.auto()

    #: Do not rebuild objects via ``__setstate__``.
    NO_SETSTATE = enum.auto()

    #: Do not fall back to setting the fields of arbitrary objects.
    NOT_ANY_OBJECT = enum.auto()

    #: Do not export classes, functions, modules and enum members by name.
    NO_GLOBALS = enum.auto()

    #: Prefix the expression with the imports it needs.
    ADD_IMPORTS = enum.auto()

    #: Print lists, tuples and sets that only contain scalars on one line.
    INLINE_SCALAR_LIST = enum.auto()

    #: Add a comma after the last element of multi-line containers.
    TRAILING_COMMA = enum.auto()


ADD_TYPE_HINTS: Final = Option.ADD_TYPE_HINTS
SKIP_DYNAMIC_PROPERTIES: Final = Option.SKIP_DYNAMIC_PROPERTIES
NO_REDUCE: Final = Option.NO_REDUCE
NO_SETSTATE: Final = Option.NO_SETSTATE
NOT_ANY_OBJECT: Final = Option.NOT_ANY_OBJECT
NO_GLOBALS: Final = Option.NO_GLOBALS
ADD_IMPORTS: Final = Option.ADD_IMPORTS
INLINE_SCALAR_LIST: Final = Option.INLINE_SCALAR_LIST
TRAILING_COMMA: Final = Option.TRAILING_COMMA
