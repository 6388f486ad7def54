"""``varexport`` command line tool

Converts JSON, pickle and msgpack files to python code::

    $ echo '{"a": [1, 2]}' | varexport --inline-scalars
    {
        'a': [1, 2]
    }
"""
from __future__ import annotations

import json
import logging
import pathlib
import pickle
import sys
from typing import Any, BinaryIO, Callable

import click

from . import _highlight
from .errors import ExportError
from .exporter import export
from .options import Option

logger = logging.getLogger(__name__)


def _load_json(data: bytes) -> Any:
    return json.loads(data)


def _load_pickle(data: bytes) -> Any:
    return pickle.loads(data)


def _load_msgpack(data: bytes) -> Any:
    try:
        import msgpack
    except ModuleNotFoundError as e:
        raise click.ClickException(
            "Support for msgpack is not available because of missing "
            "dependencies. You can fix this by running ``pip install "
            "varexport[msgpack]``"
        ) from e
    return msgpack.unpackb(data, strict_map_key=False)


LOADERS: dict[str, Callable[[bytes], Any]] = {
    "json": _load_json,
    "pickle": _load_pickle,
    "msgpack": _load_msgpack,
}

EXTENSIONS = {
    ".json": "json",
    ".pickle": "pickle",
    ".pkl": "pickle",
    ".msgpack": "msgpack",
    ".mpk": "msgpack",
}

# cli flag -> option
FLAGS = {
    "type_hints": Option.ADD_TYPE_HINTS,
    "skip_dynamic": Option.SKIP_DYNAMIC_PROPERTIES,
    "no_reduce": Option.NO_REDUCE,
    "no_setstate": Option.NO_SETSTATE,
    "no_any_object": Option.NOT_ANY_OBJECT,
    "no_globals": Option.NO_GLOBALS,
    "imports": Option.ADD_IMPORTS,
    "inline_scalars": Option.INLINE_SCALAR_LIST,
    "trailing_comma": Option.TRAILING_COMMA,
}


def guess_format(filename: str | None) -> str:
    if filename is None or filename == "-":
        return "json"
    return EXTENSIONS.get(pathlib.PurePath(filename).suffix.lower(), "json")


def to_options(**flags: bool) -> Option:
    options = Option(0)
    for name, enabled in flags.items():
        if enabled:
            options |= FLAGS[name]
    return options


@click.command()
@click.argument("file", type=click.File("rb"), default="-")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(sorted(LOADERS)),
    default=None,
    help="Format of FILE (default: guessed from the extension, else json).",
)
@click.option(
    "--type-hints", is_flag=True, help="Wrap objects in typing.cast."
)
@click.option(
    "--skip-dynamic", is_flag=True, help="Only export declared fields."
)
@click.option("--no-reduce", is_flag=True, help="Don't use __reduce__.")
@click.option("--no-setstate", is_flag=True, help="Don't use __setstate__.")
@click.option(
    "--no-any-object",
    is_flag=True,
    help="Don't rebuild arbitrary objects from their fields.",
)
@click.option(
    "--no-globals", is_flag=True, help="Don't export classes etc. by name."
)
@click.option("--imports", is_flag=True, help="Add the needed imports.")
@click.option(
    "--inline-scalars",
    is_flag=True,
    help="Print lists of scalars on one line.",
)
@click.option(
    "--trailing-comma", is_flag=True, help="Add trailing commas."
)
@click.option("--indent-level", type=click.IntRange(min=0), default=0)
@click.option(
    "--color/--no-color",
    default=None,
    help="Highlight the output (default: only on terminals).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
def main(
    file: BinaryIO,
    fmt: str | None,
    indent_level: int,
    color: bool | None,
    verbose: bool,
    **flags: bool,
) -> None:
    """Print the python code for the value stored in FILE."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if fmt is None:
        fmt = guess_format(getattr(file, "name", None))
    logger.debug("Loading %s as %s", getattr(file, "name", "-"), fmt)
    try:
        value = LOADERS[fmt](file.read())
    except (ValueError, EOFError, pickle.UnpicklingError) as e:
        raise click.ClickException(f"Failed to load the {fmt} data: {e}") from e
    try:
        code = export(value, to_options(**flags), indent_level=indent_level)
    except ExportError as e:
        raise click.ClickException(str(e)) from e
    if color is None:
        color = sys.stdout.isatty()
    if color:
        click.echo(_highlight.highlight(code), nl=False, color=True)
    else:
        click.echo(code)


if __name__ == "__main__":
    main()
