from __future__ import annotations

from typing import Any, Sequence

from varexport import text
from varexport.errors import Path
from varexport.reflection import ObjectInfo

from .base import ExportFn, ObjectExporter


class SetStateExporter(ObjectExporter):
    """Rebuilds objects that implement ``__setstate__``.

    The state returned by ``__getstate__`` is fed back to a fresh instance::

        (lambda obj: obj.__setstate__({
            'a': 1
        }) or obj)(mod.Cls.__new__(mod.Cls))
    """

    def supports(self, info: ObjectInfo) -> bool:
        return info.has_setstate

    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> list[str]:
        new = self.new_instance(info, path)
        state = obj.__getstate__()
        if state is None:
            return self.type_hint([new], info, path)
        lines = text.wrap(
            export(state, path, parents),
            "(lambda obj: obj.__setstate__(",
            f") or obj)({new})",
        )
        return self.type_hint(lines, info, path)
