"""``varexport.text``: Line based code assembly
=============================================

All the exporters produce lists of lines. These helpers are used to glue the
fragments returned by nested exports together.
"""

from __future__ import annotations

from typing import Final, Sequence

__all__ = ("INDENT", "indent", "wrap")

#: One level of indentation
INDENT: Final = "    "


def indent(lines: Sequence[str], unit: str = INDENT) -> list[str]:
    """Indent every non-empty line.

    >>> indent(["[", "", "]"])
    ['    [', '', '    ]']
    """
    return [unit + line if line else line for line in lines]


def wrap(lines: Sequence[str], prefix: str, suffix: str) -> list[str]:
    """Prepend *prefix* to the first line and append *suffix* to the last line

    >>> wrap(["[", "    1", "]"], "'k': ", ",")
    ["'k': [", '    1', '],']
    """
    if not lines:
        raise ValueError("Cannot wrap an empty list of lines")
    res = list(lines)
    res[0] = prefix + res[0]
    res[-1] = res[-1] + suffix
    return res
