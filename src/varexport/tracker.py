from __future__ import annotations

from typing import Any, Sequence

from .errors import CircularReferenceError, Path, path_to_string

__all__ = ("ReferenceTracker", "type_name")


def type_name(ty: type) -> str:
    if ty.__module__ == "builtins":
        return ty.__qualname__
    return f"{ty.__module__}.{ty.__qualname__}"


class ReferenceTracker:
    """Detect values that appear more than once under the same ancestor.

    The code we generate rebuilds every value independently, so an instance
    found twice would come back as two distinct copies (or, for cycles, loop
    forever). We therefore reject any value that was already seen under any of
    its ancestors, not only true cycles.

    A tracker must only be used for one export: it never forgets what it has
    seen.
    """

    # ancestor id -> child id -> path where the child first appeared
    children: dict[int, dict[int, Path]]
    # Since we rely on `id` to detect duplicates we have to hold on to all the
    # values we visited to make sure addresses do not get reused
    transient: list[Any]

    def __init__(self) -> None:
        self.children = {}
        self.transient = []

    def enter(self, obj: Any, path: Path, parents: Sequence[int]) -> int:
        """Register *obj* as a descendant of all of *parents*.

        Returns:
          int: The identity to push on the ancestor stack when visiting the
            content of *obj*.

        Raises:
          CircularReferenceError: if *obj* was already seen under one of
            *parents*.
        """
        addr = id(obj)
        for parent in parents:
            seen = self.children.get(parent)
            if seen is not None and addr in seen:
                raise CircularReferenceError(
                    f"Object of type {type_name(type(obj))!r} has a circular "
                    f"reference at {path_to_string(seen[addr])}. "
                    "Circular references are currently not supported.",
                    path,
                )
        self.transient.append(obj)
        for parent in parents:
            self.children.setdefault(parent, {}).setdefault(addr, path)
        return addr
