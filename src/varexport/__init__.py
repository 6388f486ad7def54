"""Export python values as python code

:mod:`varexport` converts values to the source code of a python expression
that evaluates to an equivalent value::

    >>> print(export({'point': (1, 2)}))
    {
        'point': (
            1,
            2
        )
    }

Supported values
----------------

+ :class:`str`, :class:`bytes`, :class:`int`, :class:`float`, :class:`bool`, \
    :const:`None`: Basic python primitives
+ :class:`list`, :class:`tuple`, :class:`dict`, :class:`set` and
  :class:`frozenset`: where all the elements are exportable
+ classes, functions, modules and enum members: by name
+ objects that can be rebuilt via their reduce function, via
  ``__setstate__`` or by setting their fields.

Shared references and circular references are not supported: the code we
generate rebuilds every value independently.
"""
from __future__ import annotations

from importlib import metadata

from .errors import (
    CircularReferenceError,
    ExportError,
    NoApplicableStrategyError,
    UnsupportedTypeError,
)
from .exporter import Exporter, export
from .options import (
    ADD_IMPORTS,
    ADD_TYPE_HINTS,
    INLINE_SCALAR_LIST,
    NO_GLOBALS,
    NO_REDUCE,
    NO_SETSTATE,
    NOT_ANY_OBJECT,
    SKIP_DYNAMIC_PROPERTIES,
    TRAILING_COMMA,
    Option,
)
from .reflection import register

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)
__author__ = "The varexport developers"
__copyright__ = f"2026, {__author__}"

__all__ = (
    "export",
    "register",
    "Exporter",
    "Option",
    "ExportError",
    "UnsupportedTypeError",
    "CircularReferenceError",
    "NoApplicableStrategyError",
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
