from __future__ import annotations

import ast
import math
from typing import Any

import varexport


def unedit(s: str) -> Any:
    "Run the code generated by `varexport.export` and return its value"
    *prelude, last = ast.parse(s).body
    assert isinstance(last, ast.Expr)
    env: dict[str, Any] = {}
    before = compile(
        ast.Module(prelude, type_ignores=[]), filename="<export>", mode="exec"
    )
    main = compile(ast.Expression(last.value), filename="<export>", mode="eval")
    exec(before, env)
    return eval(main, env)


def roundtrip(v: Any, options: varexport.Option = varexport.Option(0)) -> Any:
    code = varexport.export(v, options | varexport.ADD_IMPORTS)
    v2 = unedit(code)
    if isinstance(v, float) and math.isnan(v):
        assert math.isnan(v2)
    else:
        assert v2 == v, code
    assert type(v2) is type(v)
    return v2
