from __future__ import annotations

from typing import Iterable, TypeAlias

__all__ = (
    "Path",
    "ExportError",
    "UnsupportedTypeError",
    "CircularReferenceError",
    "NoApplicableStrategyError",
    "path_to_string",
)

#: Location of a value in the graph being exported.
Path: TypeAlias = tuple[str, ...]


def path_to_string(path: Iterable[str]) -> str:
    """
    >>> path_to_string(("a", "2"))
    '[a][2]'
    """
    return "".join(f"[{elt}]" for elt in path)


class ExportError(ValueError):
    """Raised when a value cannot be exported.

    Attributes:
      path(tuple[str, ...]): Where the error happened in the value being
        exported.
    """

    path: Path

    def __init__(self, message: str, path: Iterable[str] = ()) -> None:
        self.path = tuple(path)
        if self.path:
            message = f"At {path_to_string(self.path)}: {message}"
        super().__init__(message)


class UnsupportedTypeError(ExportError):
    "The value is of a kind that cannot be turned into code (files, locks...)"


class CircularReferenceError(ExportError):
    "The same instance was found twice under one of its ancestors"


class NoApplicableStrategyError(ExportError):
    "None of the enabled object exporters supports the value"
