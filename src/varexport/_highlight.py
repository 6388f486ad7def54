from __future__ import annotations

import pygments
import pygments.formatters
import pygments.lexers


def highlight(code: str) -> str:
    "Colorize python code for a terminal"
    lexer = pygments.lexers.PythonLexer()
    formatter = pygments.formatters.TerminalFormatter()
    res: str = pygments.highlight(code, lexer, formatter)
    return res
