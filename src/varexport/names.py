"""``varexport.names``: Refer to classes, functions and modules by name
===================================================================

The generated code refers to everything that isn't a plain value (the
constructors, the classes of the objects we rebuild...) via the dotted name
that can be used to import it.
"""

from __future__ import annotations

import inspect
import pydoc
import types
import typing
from typing import Any, Protocol, TypeVar

__all__ = ("locate", "get_locate_name", "get_import", "NameResolver")

locate = pydoc.locate


@typing.runtime_checkable
class QualnameAddressable(Protocol):

    __name__: str
    __qualname__: str
    __module__: str


Addressable = TypeVar(
    "Addressable", bound=types.ModuleType | QualnameAddressable
)


def _dotted_name(v: QualnameAddressable) -> str:
    if v.__name__ == "<lambda>":
        raise TypeError("lambdas are not supported")
    if ".<locals>." in v.__qualname__:
        raise ValueError(
            "values defined inside of functions are not supported."
        )
    if not isinstance(v.__module__, str):
        raise TypeError(f"{v!r} does not belong to a module")
    if v.__module__ == "builtins":
        return v.__qualname__
    return f"{v.__module__}.{v.__qualname__}"


def get_locate_name(v: Addressable) -> str:
    """Get the name that `locate` maps back to *v*.

    Builtins are not qualified:

    >>> get_locate_name(len), get_locate_name(pydoc.locate)
    ('len', 'pydoc.locate')

    Raises:
      TypeError: *v* is a lambda or isn't something that has a name.
      ValueError: *v* is defined in a function or its name refers to another
        value.
    """
    if inspect.ismodule(v):
        name = v.__name__
    elif isinstance(v, QualnameAddressable):
        name = _dotted_name(v)
    else:
        raise TypeError(f"Type {type(v).__name__!r} not supported")
    found = locate(name)
    if found is None:
        raise ValueError(
            f"Argument {v} cannot be reloaded via its name: {name!r}"
        )
    if found is not v:
        raise ValueError(
            f"Can't use {v}, it's overridden by {found} as {name!r}"
        )
    return name


def get_import(path: str) -> str | None:
    """Find the module that needs to be imported to use *path*.

    Returns :const:`None` for builtins.

    >>> get_import("collections.OrderedDict")
    'collections'
    >>> get_import("os.path.join")
    'os.path'
    >>> get_import("float") is None
    True
    """
    while True:
        obj = locate(path)
        if obj is None:
            raise ImportError(f"Failed to find object: {path!r}")
        if inspect.ismodule(obj):
            return path
        if "." not in path:
            return None
        if path.startswith(getattr(obj, "__module__", "\000") + "."):
            return typing.cast(str, obj.__module__)
        path, _ = path.rsplit(".", 1)


class NameResolver:
    """Name the globals used by one export.

    If *track_imports* is set, the resolver remembers which modules have to be
    imported for the generated code to run.
    """

    imports: set[str] | None

    def __init__(self, track_imports: bool = False) -> None:
        self.imports = set() if track_imports else None

    def __call__(self, v: Any) -> str:
        name = get_locate_name(v)
        self.record(name)
        return name

    def record(self, name: str) -> None:
        if self.imports is None:
            return
        module = get_import(name)
        if module is not None:
            self.imports.add(module)

    def prelude(self) -> list[str]:
        if not self.imports:
            return []
        return [f"import {module}" for module in sorted(self.imports)] + [""]
