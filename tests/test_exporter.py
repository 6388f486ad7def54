from __future__ import annotations

import math
import sys

import pytest

import varexport
from varexport import Exporter, export

from .utils import roundtrip, unedit


def lines(v, options=varexport.Option(0)):
    return Exporter(options).export(v)


@pytest.mark.parametrize(
    "v, expected",
    (
        (None, "None"),
        (True, "True"),
        (False, "False"),
        (-5, "-5"),
        (1.5, "1.5"),
        ("it's", '"it\'s"'),
        (b"\x00a", "b'\\x00a'"),
        (math.nan, 'float("nan")'),
        (math.inf, 'float("inf")'),
        (-math.inf, '-float("inf")'),
    ),
)
def test_scalars(v, expected):
    assert lines(v) == [expected]


@pytest.mark.parametrize(
    "x",
    (
        math.nan,
        math.inf,
        -math.inf,
        -0.0,
        0.0,
        1 / 3,
        sys.float_info.min,
        sys.float_info.max,
        2**80,
        "multi\nline 'string'",
    ),
)
def test_roundtrip_scalars(x):
    roundtrip(x)


def test_empty_composites():
    assert lines([]) == ["[]"]
    assert lines(()) == ["()"]
    assert lines({}) == ["{}"]
    assert lines(set()) == ["set()"]
    assert lines(frozenset()) == ["frozenset()"]


def test_positional():
    assert lines([1, 2, 3]) == ["[", "    1,", "    2,", "    3", "]"]
    assert lines((1,)) == ["(", "    1,", ")"]
    assert lines(frozenset([1])) == ["frozenset({", "    1", "})"]


def test_keyed():
    assert lines({0: "a", 2: "b"}) == ["{", "    0: 'a',", "    2: 'b'", "}"]
    assert lines({"a": 1, "b": 2}) == ["{", "    'a': 1,", "    'b': 2", "}"]
    # dict stay dicts even if their keys look like indices
    assert lines({0: "a", 1: "b"}) == ["{", "    0: 'a',", "    1: 'b'", "}"]


def test_indentation():
    assert lines({"a": {"b": 1}}) == [
        "{",
        "    'a': {",
        "        'b': 1",
        "    }",
        "}",
    ]


def test_multiline_key():
    v = {(1, 2): "x"}
    assert lines(v) == [
        "{",
        "    (",
        "        1,",
        "        2",
        "    ): 'x'",
        "}",
    ]
    roundtrip(v)


@pytest.mark.parametrize(
    "v",
    (
        [],
        [1, [2, [3, []]]],
        (1,),
        {"a": {"b": [1, 2, (3, 4)]}, 5: None, None: b"bytes"},
        {1, 2, 3},
        frozenset({"a", "b"}),
        [{}, set(), ()],
    ),
)
def test_roundtrip_composites(v):
    roundtrip(v)
    roundtrip(v, varexport.INLINE_SCALAR_LIST)
    roundtrip(v, varexport.TRAILING_COMMA)


def test_inline_scalar_list():
    opt = varexport.INLINE_SCALAR_LIST
    assert lines([1, "a", None], opt) == ["[1, 'a', None]"]
    assert lines((1,), opt) == ["(1,)"]
    assert lines({1}, opt) == ["{1}"]
    assert lines(frozenset({1}), opt) == ["frozenset({1})"]
    assert lines({"a": 1}, opt) == ["{", "    'a': 1", "}"]
    assert lines([[1, 2], [3]], opt) == ["[", "    [1, 2],", "    [3]", "]"]


def test_trailing_comma():
    assert lines([1, 2], varexport.TRAILING_COMMA) == [
        "[",
        "    1,",
        "    2,",
        "]",
    ]
    assert lines({"a": 1}, varexport.TRAILING_COMMA) == [
        "{",
        "    'a': 1,",
        "}",
    ]


def test_indent_level():
    assert export({"a": [1]}, indent_level=1) == (
        "{\n        'a': [\n            1\n        ]\n    }"
    )
    assert export(5, indent_level=3) == "5"


def test_no_trailing_newline():
    assert export([1]) == "[\n    1\n]"


def test_unsupported_types():
    with open(__file__) as fd:
        with pytest.raises(
            varexport.UnsupportedTypeError, match="is not supported"
        ) as exc_info:
            export({"file": fd})
    assert exc_info.value.path == ("file",)
    assert str(exc_info.value).startswith("At [file]: ")

    with pytest.raises(varexport.UnsupportedTypeError, match="generator"):
        export([(x for x in ())])


def test_recursive_list():
    v = []
    v.append(v)
    with pytest.raises(
        varexport.CircularReferenceError, match=r"circular reference at \[0\]"
    ) as exc_info:
        export(v)
    assert exc_info.value.path == ("0", "0")


def test_recursive_dict():
    v = {}
    v["self"] = [v]
    with pytest.raises(varexport.CircularReferenceError):
        export(v)


def test_shared_list():
    x = [1]
    with pytest.raises(
        varexport.CircularReferenceError, match=r"At \[b\]: .* at \[a\]"
    ):
        export({"a": x, "b": x})


def test_shared_immutable():
    t = (1, 2)
    assert unedit(export([t, t, "s", "s"])) == [t, t, "s", "s"]


def test_siblings_are_not_shared():
    v = [[1], [1]]
    assert unedit(export(v)) == v


def test_exporter_is_single_use():
    v = [[1]]
    exporter = Exporter()
    exporter.export(v)
    # The exporter remembers the content of `v` from the previous export
    with pytest.raises(varexport.CircularReferenceError):
        exporter.export(v)
    # ... but `export` always uses a fresh one
    assert export(v) == export(v)
