from __future__ import annotations

import enum
from typing import Any, Sequence

from varexport.errors import Path
from varexport.reflection import ObjectInfo

from .base import ExportFn, ObjectExporter


class GlobalExporter(ObjectExporter):
    """Refers to classes, functions, modules and enum members by name.

    >>> import math
    >>> from varexport import export
    >>> print(export([math.floor, enum.Enum]))
    [
        math.floor,
        enum.Enum
    ]
    """

    def supports(self, info: ObjectInfo) -> bool:
        return info.is_global

    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> list[str]:
        if isinstance(obj, enum.Enum):
            cls = self.name_of(info.cls, path)
            if obj.name is not None and obj.name.isidentifier():
                return [f"{cls}.{obj.name}"]
            # Combination of flags
            return self.call(cls, [export(obj.value, path, parents)])
        return [self.name_of(obj, path)]
