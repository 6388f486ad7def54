"""
``varexport.objects``: Exporters for objects
============================================

Everything that is not a scalar or a builtin container is exported by one of
the *object exporters*. They are tried in a fixed order and the first one that
supports a value exports it:

1. :class:`NamespaceExporter`: ``object()`` and :class:`types.SimpleNamespace`
2. :class:`InternalTypeExporter`: rejects types implemented in C that cannot be
   rebuilt
3. :class:`GlobalExporter`: classes, functions, modules and enum members
4. :class:`ReduceExporter`: values that can be rebuilt with a single call
5. :class:`SetStateExporter`: values that implement ``__setstate__``
6. :class:`AnyObjectExporter`: any other instance of a python class
"""

from __future__ import annotations

from varexport.names import NameResolver
from varexport.options import Option

from .any_object import AnyObjectExporter
from .base import ExportFn, ObjectExporter
from .globals import GlobalExporter
from .internal import InternalTypeExporter
from .namespace import NamespaceExporter
from .reduce import ReduceExporter
from .setstate import SetStateExporter

__all__ = (
    "AnyObjectExporter",
    "ExportFn",
    "GlobalExporter",
    "InternalTypeExporter",
    "NamespaceExporter",
    "ObjectExporter",
    "ReduceExporter",
    "SetStateExporter",
    "build_object_exporters",
)


def build_object_exporters(
    options: Option, names: NameResolver
) -> list[ObjectExporter]:
    """The object exporters enabled by *options*, by order of precedence."""
    res: list[ObjectExporter] = [
        NamespaceExporter(options, names),
        InternalTypeExporter(options, names),
    ]
    if Option.NO_GLOBALS not in options:
        res.append(GlobalExporter(options, names))
    if Option.NO_REDUCE not in options:
        res.append(ReduceExporter(options, names))
    if Option.NO_SETSTATE not in options:
        res.append(SetStateExporter(options, names))
    if Option.NOT_ANY_OBJECT not in options:
        res.append(AnyObjectExporter(options, names))
    return res
