from __future__ import annotations

from typing import Any, Sequence

from varexport import text
from varexport.errors import Path, UnsupportedTypeError
from varexport.options import Option
from varexport.reflection import ObjectInfo

from .base import ExportFn, ObjectExporter


class AnyObjectExporter(ObjectExporter):
    """Rebuilds an instance of any python class by setting its fields.

    The fields are set with ``object.__setattr__`` so this also works for
    frozen dataclasses and classes that override ``__setattr__``::

        (lambda obj: [
            object.__setattr__(obj, 'x', 1),
            object.__setattr__(obj, 'y', 2)
        ] and obj)(mod.Point.__new__(mod.Point))

    Subclasses of the builtin types (``int``, ``list``...) that reach this
    exporter are rejected: their content isn't stored in their fields.
    """

    def supports(self, info: ObjectInfo) -> bool:
        return info.is_python_class and not info.is_global

    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> list[str]:
        if info.subclasses_builtin:
            raise UnsupportedTypeError(
                f"Type {info.name!r} subclasses a builtin type and carries "
                "extra state, it cannot be exported.",
                path,
            )
        new = self.new_instance(info, path)
        fields = list(info.fields())
        if Option.SKIP_DYNAMIC_PROPERTIES in self.options:
            declared = info.declared_fields
            fields = [(k, v) for k, v in fields if k in declared]
        if not fields:
            return self.type_hint([new], info, path)
        lines = ["(lambda obj: ["]
        for idx, (name, value) in enumerate(fields):
            suffix = ")," if idx < len(fields) - 1 else ")"
            exported = text.wrap(
                export(value, (*path, name), parents),
                f"object.__setattr__(obj, {name!r}, ",
                suffix,
            )
            lines.extend(text.indent(exported))
        lines.append(f"] and obj)({new})")
        return self.type_hint(lines, info, path)
