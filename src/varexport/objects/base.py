from __future__ import annotations

import abc
import typing
from typing import Any, Protocol, Sequence

from varexport import text
from varexport.errors import ExportError, Path
from varexport.names import NameResolver
from varexport.options import Option
from varexport.reflection import ObjectInfo

__all__ = ("ExportFn", "ObjectExporter")


class ExportFn(Protocol):
    "Callback used by the object exporters to export nested values"

    def __call__(
        self, value: Any, path: Path, parents: Sequence[int]
    ) -> list[str]:  # pragma: no cover
        ...


class ObjectExporter(abc.ABC):
    """Turns one category of objects into code.

    Object exporters are asked in turn if they :meth:`supports` an object; the
    first one that does :meth:`export` it. They do not know about each other or
    about how the values they contain are exported: nested values are handed
    back to the *export* callback.
    """

    options: Option
    names: NameResolver

    def __init__(self, options: Option, names: NameResolver) -> None:
        self.options = options
        self.names = names

    @abc.abstractmethod
    def supports(self, info: ObjectInfo) -> bool:  # pragma: no cover
        ...

    @abc.abstractmethod
    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> list[str]:  # pragma: no cover
        ...

    def name_of(self, v: Any, path: Path) -> str:
        "The dotted name of a class/function/module, as an ExportError"
        try:
            return self.names(v)
        except (TypeError, ValueError, ImportError) as e:
            raise ExportError(str(e), path) from e

    def new_instance(self, info: ObjectInfo, path: Path) -> str:
        "Code that creates an uninitialised instance of the object's class"
        cls = self.name_of(info.cls, path)
        return f"{cls}.__new__({cls})"

    def type_hint(
        self, lines: list[str], info: ObjectInfo, path: Path
    ) -> list[str]:
        if Option.ADD_TYPE_HINTS not in self.options:
            return lines
        cast = self.name_of(typing.cast, path)
        cls = self.name_of(info.cls, path)
        return text.wrap(lines, f"{cast}({cls}, ", ")")

    def call(
        self,
        fn: str,
        args: Sequence[list[str]],
        kwargs: Sequence[tuple[str, list[str]]] = (),
    ) -> list[str]:
        """Format a function call from the exported arguments.

        The call fits on one line if every argument does.
        """
        items = [*args, *(text.wrap(v, f"{k}=", "") for k, v in kwargs)]
        if not items:
            return [f"{fn}()"]
        if all(len(item) == 1 for item in items):
            return [f"{fn}({', '.join(item[0] for item in items)})"]
        lines = [f"{fn}("]
        for idx, item in enumerate(items):
            suffix = "," if idx < len(items) - 1 else ""
            lines.extend(text.indent(text.wrap(item, "", suffix)))
        lines.append(")")
        return lines
