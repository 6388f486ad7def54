"""
``varexport.exporter``: Turn values into code
=============================================

"""

from __future__ import annotations

import io
import logging
import socket
import types
from typing import Any, Final, Sequence

from . import text
from .errors import (
    NoApplicableStrategyError,
    Path,
    UnsupportedTypeError,
    path_to_string,
)
from .literals import SCALAR_TYPES, is_scalar, literal
from .names import NameResolver
from .objects import ObjectExporter, build_object_exporters
from .options import Option
from .reflection import ObjectInfo
from .tracker import ReferenceTracker, type_name

__all__ = ("Exporter", "export")

logger = logging.getLogger(__name__)

#: Values that are handles on resources of the running process.
RESOURCE_TYPES: Final = (
    io.IOBase,
    socket.socket,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.FrameType,
    types.TracebackType,
)

# Containers that have an identity (and can therefore be part of a cycle)
MUTABLE_COMPOSITES: Final = (list, dict, set)

# type -> (empty, opening, closing)
BRACKETS: Final[dict[type, tuple[str, str, str]]] = {
    list: ("[]", "[", "]"),
    tuple: ("()", "(", ")"),
    dict: ("{}", "{", "}"),
    set: ("set()", "{", "}"),
    frozenset: ("frozenset()", "frozenset({", "})"),
}


class Exporter:
    """Converts values to lists of lines of python code.

    An exporter keeps track of every object it visits to detect circular
    references, so each exporter must only be used to export one value.
    """

    options: Option
    names: NameResolver
    tracker: ReferenceTracker
    object_exporters: list[ObjectExporter]

    def __init__(self, options: Option = Option(0)) -> None:
        self.options = options
        self.names = NameResolver(
            track_imports=Option.ADD_IMPORTS in options
        )
        self.tracker = ReferenceTracker()
        self.object_exporters = build_object_exporters(options, self.names)

    def export(
        self, value: Any, path: Path = (), parents: Sequence[int] = ()
    ) -> list[str]:
        """Export a value

        Args:
          value: The value to export.
          path: The path to *value* in the graph being exported.
          parents: The identities of all the values that contain *value*.

        Returns:
          list[str]: The lines of code.
        """
        ty = type(value)
        if ty in SCALAR_TYPES:
            return [literal(value)]
        if ty in BRACKETS:
            return self.export_composite(value, path, parents)
        if isinstance(value, RESOURCE_TYPES):
            raise UnsupportedTypeError(
                f"Type {type_name(ty)!r} is not supported.", path
            )
        return self.export_object(value, path, parents)

    def export_composite(
        self,
        value: list[Any] | tuple[Any, ...] | dict[Any, Any] | set[Any],
        path: Path,
        parents: Sequence[int],
    ) -> list[str]:
        ty = type(value)
        if ty in MUTABLE_COMPOSITES:
            parents = (*parents, self.tracker.enter(value, path, parents))
        empty, opar, cpar = BRACKETS[ty]
        if not value:
            return [empty]
        if (
            ty is not dict
            and Option.INLINE_SCALAR_LIST in self.options
            and all(is_scalar(elt) for elt in value)
        ):
            body = ", ".join(literal(elt) for elt in value)
            if len(value) == 1 and ty is tuple:
                body += ","
            return [f"{opar}{body}{cpar}"]

        count = len(value)
        trailing = (
            Option.TRAILING_COMMA in self.options
            or (count == 1 and ty is tuple)
        )
        result = [opar]
        if isinstance(value, dict):
            for idx, (key, item) in enumerate(value.items()):
                suffix = "," if idx < count - 1 or trailing else ""
                item_path = (*path, str(key))
                *head, last = self.export(key, item_path, parents)
                exported = self.export(item, item_path, parents)
                exported = head + text.wrap(exported, f"{last}: ", suffix)
                result.extend(text.indent(exported))
        else:
            for idx, item in enumerate(value):
                suffix = "," if idx < count - 1 or trailing else ""
                exported = self.export(item, (*path, str(idx)), parents)
                result.extend(text.indent(text.wrap(exported, "", suffix)))
        result.append(cpar)
        return result

    def export_object(
        self, obj: Any, path: Path, parents: Sequence[int]
    ) -> list[str]:
        info = ObjectInfo(obj)
        # Globals are referred to by name: every occurrence evaluates to the
        # same instance so they can be repeated freely.
        if not (info.is_global and Option.NO_GLOBALS not in self.options):
            parents = (*parents, self.tracker.enter(obj, path, parents))
        for exporter in self.object_exporters:
            if exporter.supports(info):
                logger.debug(
                    "Exporting %s at %r with %s",
                    info.name,
                    path_to_string(path),
                    type(exporter).__name__,
                )
                return exporter.export(obj, info, path, parents, self.export)
        raise NoApplicableStrategyError(
            f"Type {info.name!r} cannot be exported using the current "
            "options.",
            path,
        )


def export(
    value: Any, options: Option = Option(0), *, indent_level: int = 0
) -> str:
    """Export *value* as python code.

    The code is a single python expression that rebuilds *value* when it is
    evaluated (plus the imports it needs if :const:`~varexport.ADD_IMPORTS` is
    set)::

      >>> print(export({'name': 'varexport', 'tags': ['code', 'export']}))
      {
          'name': 'varexport',
          'tags': [
              'code',
              'export'
          ]
      }

      >>> print(export([1, 2, 3], Option.INLINE_SCALAR_LIST))
      [1, 2, 3]

    Args:
      value: The value to export.
      options: The :class:`~varexport.Option` flags to use.
      indent_level: Indent all the lines but the first one by this many
        levels. This is useful to embed the code in an indented block.

    Raises:
      ExportError: if the value (or a value it contains) cannot be exported.
    """
    exporter = Exporter(options)
    lines = exporter.export(value)
    if indent_level > 0:
        lines[1:] = text.indent(lines[1:], text.INDENT * indent_level)
    return "\n".join(exporter.names.prelude() + lines)

