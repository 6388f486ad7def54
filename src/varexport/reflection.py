"""``varexport.reflection``: Describe objects to the object exporters
=================================================================

The object exporters never poke at the objects they are offered directly to
decide whether they can export them. Instead they look at an
:class:`ObjectInfo`: a description of the object's type, its fields and the
hooks it provides to be rebuilt.

This module also contains the registry of reducers (:func:`register`), used to
explain how to rebuild types that do not support ``__reduce__`` in a way that
can be turned into readable code.
"""

from __future__ import annotations

import collections
import copyreg
import dataclasses
import datetime
import enum
import functools
import inspect
import types
import typing
import weakref
from typing import Any, Callable, Iterator, Type, TypeAlias, TypeVar

from .tracker import type_name

__all__ = (
    "DISPATCH_TABLE",
    "ObjectInfo",
    "Reduced",
    "Reducer",
    "Reduction",
    "register",
)

T = TypeVar("T")

Reduced: TypeAlias = tuple[Callable[..., T], tuple[Any, ...], dict[str, Any]]

Reducer: TypeAlias = Callable[[T], Reduced[T]]

DISPATCH_TABLE = weakref.WeakKeyDictionary[Type[Any], Reducer[Any]]()

# Set on every type implemented in C (static or created from a spec) but never
# on the types created by class statements
_TPFLAGS_IMMUTABLETYPE = 1 << 8

# The reduce protocol used when asking objects how to rebuild them
_PROTOCOL = 4

# Types whose subclasses carry state that isn't stored in their fields
_BUILTIN_BASES = (
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    tuple,
    list,
    dict,
    set,
    frozenset,
)


def _infer_reducer_type(f: Reducer[T]) -> Type[T]:
    values = list(inspect.signature(f, eval_str=True).parameters.values())
    if len(values) != 1:
        raise ValueError(
            "The registered function should take only one argument"
        )
    [arg] = values
    ty: Type[T] | None = arg.annotation
    origin = typing.get_origin(ty)
    if origin is not None:
        ty = origin
    assert ty is not None
    return ty


@typing.overload
def register(function: Reducer[T], /) -> Reducer[T]:  # pragma: no cover
    ...


@typing.overload
def register(
    *, type: Type[T] | None = None
) -> Callable[[Reducer[T]], Reducer[T]]:  # pragma: no cover
    ...


def register(
    function: Reducer[T] | None = None,
    /,
    *,
    type: Type[T] | None = None,
) -> Reducer[T] | Callable[[Reducer[T]], Reducer[T]]:
    """Register a function to use while exporting objects of a given type.

    *function* is expected to take objects of type *T* and to return a tuple
    describing how to recreate the object: a function, the positional
    arguments and the keyword arguments to call it with.

    If *type* is not specified, :func:`register` uses the type annotation on
    the first argument to deduce which type register *function* for.

    Here are three equivalent ways to add support for the :class:`complex`
    type::

        >>> @register
        ... def _reduce_complex(c: complex):
        ...   return complex, (c.real, c.imag), {}

        >>> @register()
        ... def _reduce_complex(c: complex):
        ...   return complex, (c.real, c.imag), {}

        >>> @register(type=complex)
        ... def _reduce_complex(c: complex):
        ...   return complex, (c.real, c.imag), {}

    Reducers are looked up by exact type: they are not used for subclasses of
    *type*.

    Args:

      function: The reduction we are registering

      type: The type we are registering the function for
    """

    def wrapper(function: Reducer[T]) -> Reducer[T]:
        cls = _infer_reducer_type(function) if type is None else type
        DISPATCH_TABLE[cls] = function
        return function

    if function is None:
        return wrapper
    return wrapper(function)


@register
def _reduce_complex(c: complex) -> Reduced[complex]:
    return complex, (c.real, c.imag), {}


@register
def _reduce_date(d: datetime.date) -> Reduced[datetime.date]:
    return datetime.date, (d.year, d.month, d.day), {}


def _time_kwargs(t: datetime.datetime | datetime.time) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if t.tzinfo is not None:
        kwargs["tzinfo"] = t.tzinfo
    if t.fold:
        kwargs["fold"] = t.fold
    return kwargs


@register
def _reduce_datetime(d: datetime.datetime) -> Reduced[datetime.datetime]:
    args = (d.year, d.month, d.day, d.hour, d.minute, d.second, d.microsecond)
    return datetime.datetime, args, _time_kwargs(d)


@register
def _reduce_time(t: datetime.time) -> Reduced[datetime.time]:
    return (
        datetime.time,
        (t.hour, t.minute, t.second, t.microsecond),
        _time_kwargs(t),
    )


@register
def _reduce_ordered_dict(
    d: collections.OrderedDict[Any, Any]
) -> Reduced[collections.OrderedDict[Any, Any]]:
    return collections.OrderedDict, (list(d.items()),), {}


@register
def _reduce_deque(
    d: collections.deque[Any],
) -> Reduced[collections.deque[Any]]:
    kwargs = {} if d.maxlen is None else {"maxlen": d.maxlen}
    return collections.deque, (list(d),), kwargs


@register
def _reduce_defaultdict(
    d: collections.defaultdict[Any, Any]
) -> Reduced[collections.defaultdict[Any, Any]]:
    return collections.defaultdict, (d.default_factory, dict(d)), {}


@dataclasses.dataclass(slots=True, frozen=True)
class Reduction:
    """How to rebuild an object: ``fn(*args, **kwargs)``.

    If *new* is set, *fn* is the class of the object and the object is
    rebuilt with ``fn.__new__(fn, *args, **kwargs)``.

    *listitems* and *dictitems* are added to the object after it is created
    (via ``extend`` and ``update``).
    """

    fn: Callable[..., Any]
    args: tuple[Any, ...]
    kwargs: dict[str, Any]
    new: bool = False
    listitems: tuple[Any, ...] = ()
    dictitems: tuple[tuple[Any, Any], ...] = ()


def _reduce_ex(obj: Any) -> Reduction | None:
    reductor = copyreg.dispatch_table.get(type(obj))
    try:
        rv = reductor(obj) if reductor is not None else obj.__reduce_ex__(
            _PROTOCOL
        )
    except TypeError:
        # `cannot pickle '...' object`
        return None
    # A string means the object is a global: we cannot rebuild it with a call
    if not isinstance(rv, tuple):
        return None
    fn, args, state, listitems, dictitems, *_ = (*rv, None, None, None)
    if state:
        return None
    # Subclasses of list and dict also return iterators on their content
    items = () if listitems is None else tuple(listitems)
    pairs = () if dictitems is None else tuple(dictitems)
    new = False
    kwargs: dict[str, Any] = {}
    match fn:
        case copyreg.__newobj__:
            fn, *args = args
            new = True
        case copyreg.__newobj_ex__:
            fn, args, kwargs = args
            new = True
        case copyreg._reconstructor:
            return None
    return Reduction(
        fn, tuple(args), dict(kwargs), new, listitems=items, dictitems=pairs
    )


class ObjectInfo:
    """Description of an object offered to the object exporters

    Attributes:
      obj: The object being described.
      cls(type): Its exact type.
      name(str): A printable name for the type (used in error messages).
    """

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        self.cls = type(obj)
        self.name = type_name(self.cls)

    @property
    def is_python_class(self) -> bool:
        "Is the type defined by a class statement (as opposed to C code)"
        return not self.cls.__flags__ & _TPFLAGS_IMMUTABLETYPE

    @property
    def is_global(self) -> bool:
        "Is the object something that is referred to by name"
        return isinstance(
            self.obj,
            type
            | types.FunctionType
            | types.BuiltinFunctionType
            | types.ModuleType
            | enum.Enum,
        )

    @property
    def subclasses_builtin(self) -> bool:
        return issubclass(self.cls, _BUILTIN_BASES)

    @property
    def has_reduce_hook(self) -> bool:
        """Does the type know how to rebuild itself

        :class:`object` provides a default ``__reduce_ex__`` that fails on most
        types implemented in C, we do not count it.
        """
        cls = self.cls
        return (
            cls in DISPATCH_TABLE
            or cls in copyreg.dispatch_table
            or cls.__reduce_ex__ is not object.__reduce_ex__
            or cls.__reduce__ is not object.__reduce__
        )

    @property
    def has_setstate(self) -> bool:
        return callable(getattr(self.cls, "__setstate__", None))

    @functools.cached_property
    def reduction(self) -> Reduction | None:
        """How to rebuild the object with one call, if it can be done."""
        reducer = DISPATCH_TABLE.get(self.cls)
        if reducer is not None:
            fn, args, kwargs = reducer(self.obj)
            return Reduction(fn, tuple(args), dict(kwargs))
        return _reduce_ex(self.obj)

    @functools.cached_property
    def slots(self) -> tuple[str, ...]:
        "All the slots declared by the class and its bases"
        res: dict[str, None] = {}
        for klass in reversed(self.cls.__mro__):
            slots = klass.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for slot in slots:
                if slot in ("__dict__", "__weakref__"):
                    continue
                if slot.startswith("__") and not slot.endswith("__"):
                    slot = f"_{klass.__name__.lstrip('_')}{slot}"
                res[slot] = None
        return tuple(res)

    @functools.cached_property
    def declared_fields(self) -> frozenset[str]:
        """The fields that are part of the definition of the class

        These are the slots, the dataclass fields and the annotated class
        attributes.
        """
        res = set(self.slots)
        if dataclasses.is_dataclass(self.cls):
            res.update(f.name for f in dataclasses.fields(self.cls))
        for klass in self.cls.__mro__:
            res.update(klass.__dict__.get("__annotations__", {}))
        return frozenset(res)

    def fields(self) -> Iterator[tuple[str, Any]]:
        """The fields set on the object: the slots then the ``__dict__``."""
        obj = self.obj
        for slot in self.slots:
            try:
                value = object.__getattribute__(obj, slot)
            except AttributeError:
                # unset slot
                continue
            yield slot, value
        yield from getattr(obj, "__dict__", {}).items()
