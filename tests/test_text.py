import pytest

from varexport import text


def test_indent():
    assert text.indent(["a", "", "  b"]) == ["    a", "", "      b"]
    assert text.indent([]) == []
    assert text.indent(["a"], unit="\t") == ["\ta"]


def test_indent_does_not_modify_input():
    lines = ["a", "b"]
    text.indent(lines)
    assert lines == ["a", "b"]


def test_wrap():
    assert text.wrap(["x"], "K: ", ",") == ["K: x,"]
    assert text.wrap(["[", "    1", "]"], "K: ", ",") == [
        "K: [",
        "    1",
        "],",
    ]
    assert text.wrap(["x"], "", "") == ["x"]


def test_wrap_empty():
    with pytest.raises(ValueError, match="empty"):
        text.wrap([], "K: ", ",")
