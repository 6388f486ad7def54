import collections
import math

import pytest

import varexport
from varexport import names


class Outer:
    class Inner:
        pass

    @staticmethod
    def fn():
        pass


def _rebound_fn():
    pass


REBOUND_FN = _rebound_fn


def _rebound_fn():
    pass


def unbound():
    pass


UNBOUND_FN = unbound

del unbound


@pytest.mark.parametrize(
    "v, expected",
    (
        (names, "varexport.names"),
        (Outer.Inner, f"{__name__}.Outer.Inner"),
        (Outer.fn, f"{__name__}.Outer.fn"),
        # builtin functions aren't python functions but have a qualname
        (math.floor, "math.floor"),
        # builtins are not qualified
        (id, "id"),
        (dict, "dict"),
    ),
)
def test_get_locate_name(v, expected):
    assert names.get_locate_name(v) == expected
    assert names.locate(expected) is v


def test_get_locate_name_errors():
    class Local:
        pass

    with pytest.raises(ValueError, match="defined inside of functions"):
        names.get_locate_name(Local)

    with pytest.raises(TypeError, match="lambdas"):
        names.get_locate_name(lambda: 5)

    with pytest.raises(TypeError, match="Type 'int' not supported"):
        names.get_locate_name(5)

    with pytest.raises(ValueError, match="it's overridden"):
        names.get_locate_name(REBOUND_FN)

    with pytest.raises(ValueError, match="cannot be reloaded"):
        names.get_locate_name(UNBOUND_FN)


def test_get_import():
    assert names.get_import(f"{__name__}.Outer.Inner") == __name__
    assert names.get_import("os.path") == "os.path"
    assert names.get_import("math.floor") == "math"
    assert names.get_import("dict") is None
    with pytest.raises(ImportError, match="Failed to find"):
        names.get_import("varexport.does_not_exist")


def test_resolver():
    resolve = names.NameResolver(track_imports=True)
    assert resolve(collections.OrderedDict) == "collections.OrderedDict"
    assert resolve(math.floor) == "math.floor"
    assert resolve(collections.deque) == "collections.deque"
    assert resolve(len) == "len"
    assert resolve(Outer.Inner) == f"{__name__}.Outer.Inner"
    assert resolve.prelude() == [
        "import collections",
        "import math",
        f"import {__name__}",
        "",
    ]


def test_resolver_without_imports():
    resolve = names.NameResolver()
    assert resolve(collections.OrderedDict) == "collections.OrderedDict"
    assert resolve.imports is None
    assert resolve.prelude() == []


def test_resolver_errors_record_nothing():
    class Local:
        pass

    resolve = names.NameResolver(track_imports=True)
    with pytest.raises(TypeError):
        resolve(lambda: 5)
    with pytest.raises(ValueError):
        resolve(Local)
    assert resolve.prelude() == []


def test_name_errors_in_exports():
    class Local:
        pass

    with pytest.raises(
        varexport.ExportError,
        match=r"At \[k\]\[0\]: values defined inside of functions",
    ) as exc_info:
        export_with_imports({"k": [Local]})
    assert exc_info.value.path == ("k", "0")

    # Instances of local classes fail while naming their class
    with pytest.raises(varexport.ExportError, match=r"At \[0\]: values"):
        export_with_imports([Local()])

    with pytest.raises(varexport.ExportError, match="cannot be reloaded"):
        export_with_imports(UNBOUND_FN)


def export_with_imports(v):
    return varexport.export(v, varexport.ADD_IMPORTS)
