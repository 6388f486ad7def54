from __future__ import annotations

from typing import Any, Sequence

from varexport import text
from varexport.errors import Path
from varexport.reflection import ObjectInfo

from .base import ExportFn, ObjectExporter


def _fill(method: str, items: list[str], new: list[str]) -> list[str]:
    "Code that calls `new.method(items)` and returns `new`"
    *head, last = text.wrap(items, f"(lambda obj: obj.{method}(", ") or obj)(")
    return head + text.wrap(new, last, ")")


class ReduceExporter(ObjectExporter):
    """Rebuilds objects by calling the function they reduce to.

    The reduction comes from the functions added via
    :func:`~varexport.register` or, failing that, from the object's
    ``__reduce_ex__``. Only reductions that do not need to restore extra state
    after the call are supported. The content of subclasses of :class:`list`
    and :class:`dict` is added back after the call::

        >>> import datetime
        >>> from varexport import export
        >>> print(export(datetime.date(2022, 4, 1)))
        datetime.date(2022, 4, 1)
    """

    def supports(self, info: ObjectInfo) -> bool:
        return info.reduction is not None

    def export(
        self,
        obj: Any,
        info: ObjectInfo,
        path: Path,
        parents: Sequence[int],
        export: ExportFn,
    ) -> list[str]:
        reduction = info.reduction
        assert reduction is not None
        fn = self.name_of(reduction.fn, path)
        if reduction.new:
            args = [[fn]]
            fn = f"{fn}.__new__"
        else:
            args = []
        args.extend(
            export(arg, (*path, str(idx)), parents)
            for idx, arg in enumerate(reduction.args)
        )
        kwargs = [
            (k, export(v, (*path, k), parents))
            for k, v in reduction.kwargs.items()
        ]
        lines = self.call(fn, args, kwargs)
        if reduction.listitems:
            items = export(list(reduction.listitems), path, parents)
            lines = _fill("extend", items, lines)
        if reduction.dictitems:
            pairs = export(dict(reduction.dictitems), path, parents)
            lines = _fill("update", pairs, lines)
        return lines
