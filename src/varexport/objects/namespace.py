from __future__ import annotations

import keyword
import types
from typing import Any, Sequence

from varexport.errors import Path
from varexport.reflection import ObjectInfo

from .base import ExportFn, ObjectExporter


def _is_kwarg(name: object) -> bool:
    return (
        isinstance(name, str)
        and name.isidentifier()
        and not keyword.iskeyword(name)
    )


class NamespaceExporter(ObjectExporter):
    """Handles the "empty" objects: ``object()`` and ``SimpleNamespace``.

    A namespace is rebuilt from its attributes::

        types.SimpleNamespace(
            a=1,
            b=[
                2
            ]
        )
    """

    def supports(self, info: ObjectInfo) -> bool:
        return info.cls is object or info.cls is types.SimpleNamespace

    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> list[str]:
        if info.cls is object:
            return ["object()"]
        ctor = self.name_of(types.SimpleNamespace, path)
        attrs = vars(obj)
        if all(_is_kwarg(k) for k in attrs):
            return self.call(
                ctor,
                (),
                [(k, export(v, (*path, k), parents)) for k, v in attrs.items()],
            )
        # `setattr` lets people use any string as an attribute name
        first, *rest = export(attrs, path, parents)
        return self.call(ctor, [[f"**{first}", *rest]])
