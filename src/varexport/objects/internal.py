from __future__ import annotations

from typing import Any, NoReturn, Sequence

from varexport.errors import Path, UnsupportedTypeError
from varexport.reflection import ObjectInfo

from .base import ExportFn, ObjectExporter


class InternalTypeExporter(ObjectExporter):
    """Rejects instances of types implemented in C that cannot be rebuilt.

    Those types do not expose their state and do not provide a way to recreate
    their instances (e.g.: locks), we refuse them before the other exporters
    get a chance to produce code that would silently lose their state.
    """

    def supports(self, info: ObjectInfo) -> bool:
        return not (
            info.is_python_class or info.is_global or info.has_reduce_hook
        )

    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> NoReturn:
        raise UnsupportedTypeError(
            f"Type {info.name!r} is internal, and cannot be exported.", path
        )
