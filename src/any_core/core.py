"""Any, the tagged value container at the heart of the value core.

An ``Any`` pairs a :class:`~any_core.model.Kind` tag with an
:class:`~any_core.casting.AutoCast` payload.  The tag is captured once, at
construction, and every kind-specific behaviour (equality, hashing,
operators, indexing, iteration) dispatches on it.

Usage::

    a = Any([1, 2, 3])
    a.push(4)
    a[0]                  # → Any(i64: 1)
    a + Any([5])          # → Any(array: [1, 2, 3, 4, 5])
    Any.i32(5) == Any(5)  # → False, tags differ
"""

from __future__ import annotations

import logging
import struct
from typing import Callable, Iterator

from .casting import AutoCast
from .containers import Array, Map, Pair
from .errors import NonIterable
from .function import Function
from .model import FLOAT_KINDS, INTEGER_KINDS, Kind
from .values import Boolean, Float, Integer, Null, Text, _NullType

logger = logging.getLogger(__name__)


_PAYLOAD_KINDS: dict[type, Kind] = {
    Text: Kind.STRING,
    Boolean: Kind.BOOL,
    Array: Kind.ARRAY,
    Map: Kind.MAP,
    Pair: Kind.PAIR,
    Function: Kind.FUNCTION,
    _NullType: Kind.NULL,
}


# ---------------------------------------------------------------------------
# Host value conversion
# ---------------------------------------------------------------------------

def kind_of(payload: AutoCast) -> Kind:
    """Return the tag for *payload*; unknown AutoCast types are extensions."""
    if isinstance(payload, (Integer, Float)):
        return payload.kind
    return _PAYLOAD_KINDS.get(type(payload), Kind.EXTENSION)


def to_payload(value: object) -> AutoCast:
    """Convert a host value to a payload.

    - AutoCast instances → unchanged
    - None → Null; bool → Boolean; int → i64 Integer; float → f64 Float
    - str → Text; list → Array; dict → Map; 2-tuple → Pair
    """
    if isinstance(value, AutoCast):
        return value
    if value is None:
        return Null
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, list):
        return Array(value)
    if isinstance(value, dict):
        return Map(value)
    if isinstance(value, tuple) and len(value) == 2:
        return Pair(*value)
    raise TypeError(f"cannot store a {type(value).__name__} in Any")


def null() -> Any:
    """Build a fresh null value."""
    return Any(Null)


def _width(kind: Kind) -> classmethod:
    def make(cls: type[Any], value: int | float) -> Any:
        if kind in FLOAT_KINDS:
            return cls(Float(value, kind))
        return cls(Integer(value, kind))

    make.__name__ = kind.value
    make.__doc__ = f"Build a {kind}-tagged value."
    return classmethod(make)


# ---------------------------------------------------------------------------
# Any
# ---------------------------------------------------------------------------

class Any:
    """A value whose kind is decided at runtime."""

    __slots__ = ("_kind", "_data")

    def __init__(self, value: object = None) -> None:
        if isinstance(value, Any):
            value = value._data.clone()
        data = to_payload(value)
        self._kind = kind_of(data)
        self._data = data

    i8 = _width(Kind.I8)
    i16 = _width(Kind.I16)
    i32 = _width(Kind.I32)
    i64 = _width(Kind.I64)
    isize = _width(Kind.ISIZE)
    u8 = _width(Kind.U8)
    u16 = _width(Kind.U16)
    u32 = _width(Kind.U32)
    u64 = _width(Kind.U64)
    usize = _width(Kind.USIZE)
    f32 = _width(Kind.F32)
    f64 = _width(Kind.F64)

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def payload(self) -> AutoCast:
        return self._data

    def clone(self) -> Any:
        """Deep copy.  Function values share their callable."""
        return Any(self._data.clone())

    def __copy__(self) -> Any:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Any:
        return self.clone()

    # -- Type checks ----------------------------------------------------

    def is_integer(self) -> bool:
        return self._kind in INTEGER_KINDS

    def is_float(self) -> bool:
        return self._kind in FLOAT_KINDS

    def is_number(self) -> bool:
        return self.is_integer() or self.is_float()

    def is_nan(self) -> bool:
        return self.is_float() and self._data.to_float() != self._data.to_float()

    def is_string(self) -> bool:
        return self._kind is Kind.STRING

    def is_array(self) -> bool:
        return self._kind is Kind.ARRAY

    def is_map(self) -> bool:
        return self._kind is Kind.MAP

    def is_pair(self) -> bool:
        return self._kind is Kind.PAIR

    def is_null(self) -> bool:
        return self._kind is Kind.NULL

    def is_boolean(self) -> bool:
        return self._kind is Kind.BOOL

    def is_function(self) -> bool:
        return self._kind is Kind.FUNCTION

    # -- Casts ----------------------------------------------------------

    def to_integer(self) -> int:
        return self._data.to_integer()

    def to_float(self) -> float:
        return self._data.to_float()

    def to_str(self) -> str:
        return self._data.to_str()

    def to_array(self) -> Array:
        return self._data.to_array()

    def to_map(self) -> Map:
        return self._data.to_map()

    def to_boolean(self) -> bool:
        return self._data.to_boolean()

    def to_pair(self) -> Pair:
        return self._data.to_pair()

    def to_function(self) -> Function:
        return self._data.to_function()

    def __str__(self) -> str:
        return self._data.to_str()

    def __repr__(self) -> str:
        return f"Any({self._kind}: {self._data.to_str()})"

    def __bool__(self) -> bool:
        return self._data.to_boolean()

    # -- Array operations -----------------------------------------------

    def _soft_miss(self, operation: str) -> Any:
        logger.debug("%s on a %s value ignored", operation, self._kind)
        return null()

    def push(self, value: object) -> None:
        if self._kind is Kind.ARRAY:
            self._data.push(value)
        else:
            self._soft_miss("push")

    def pop(self) -> Any:
        if self._kind is not Kind.ARRAY:
            return self._soft_miss("pop")
        value = self._data.pop()
        return null() if value is None else value

    def unshift(self, value: object) -> None:
        if self._kind is Kind.ARRAY:
            self._data.unshift(value)
        else:
            self._soft_miss("unshift")

    def shift(self) -> Any:
        if self._kind is not Kind.ARRAY:
            return self._soft_miss("shift")
        value = self._data.shift()
        return null() if value is None else value

    def reverse(self) -> Any:
        """Reverse an array in place and return it for chaining."""
        if self._kind is not Kind.ARRAY:
            return self._soft_miss("reverse")
        self._data.reverse()
        return self

    # -- Map operations -------------------------------------------------

    def set(self, key: object, value: object) -> None:
        if self._kind is Kind.MAP:
            self._data.set(key, value)
        else:
            self._soft_miss("set")

    def get(self, key: object) -> Any:
        """Return a copy of the value stored under *key*, or null."""
        if self._kind is not Kind.MAP:
            return self._soft_miss("get")
        value = self._data.get(key)
        if value is None:
            logger.debug("get: key %s is absent", key)
            return null()
        return value.clone()

    def delete(self, key: object) -> Any:
        if self._kind is not Kind.MAP:
            return self._soft_miss("delete")
        value = self._data.delete(key)
        return null() if value is None else value

    # -- Common operations ----------------------------------------------

    def _size(self) -> int | None:
        if self._kind in (Kind.ARRAY, Kind.MAP):
            return self._data.length()
        if self._kind is Kind.STRING:
            return len(self._data.value)
        return None

    def length(self) -> Any:
        size = self._size()
        return self._soft_miss("length") if size is None else Any.usize(size)

    def is_empty(self) -> Any:
        size = self._size()
        return self._soft_miss("is_empty") if size is None else Any(size == 0)

    def __len__(self) -> int:
        size = self._size()
        if size is None:
            raise TypeError(f"a {self._kind} value has no length")
        return size

    # -- Function operations --------------------------------------------

    def call(self, args: object = None) -> Any:
        if self._kind is not Kind.FUNCTION:
            return self._soft_miss("call")
        return self._data.call(Array() if args is None else args)

    def __call__(self, args: object = None) -> Any:
        return self.call(args)

    # -- Equality & hashing ---------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Any):
            return NotImplemented
        if self._kind is not other._kind:
            return False
        kind = self._kind
        if kind in INTEGER_KINDS:
            return self._data.to_integer() == other._data.to_integer()
        if kind in FLOAT_KINDS:
            return self._data.to_float() == other._data.to_float()
        if kind is Kind.STRING or kind is Kind.BOOL:
            return self._data.value == other._data.value
        if kind is Kind.ARRAY:
            return self._data.items == other._data.items
        if kind is Kind.MAP:
            return self._data.entries == other._data.entries
        return self._data.to_str() == other._data.to_str()

    def __hash__(self) -> int:
        kind = self._kind
        content: object
        if kind in INTEGER_KINDS:
            content = self._data.to_integer()
        elif kind in FLOAT_KINDS:
            # 0.0 == -0.0, so both must hash alike
            value = self._data.to_float() or 0.0
            content = struct.unpack("<Q", struct.pack("<d", value))[0]
        elif kind is Kind.STRING or kind is Kind.BOOL:
            content = self._data.value
        elif kind is Kind.ARRAY:
            content = tuple(hash(v) for v in self._data.items)
        elif kind is Kind.MAP:
            content = frozenset((hash(k), hash(v)) for k, v in self._data.entries.items())
        else:
            content = self._data.to_str()
        return hash((kind, content))

    # -- Indexing & iteration -------------------------------------------

    def index(self, key: object) -> Any:
        from .getter import index_get
        return index_get(self, key)

    def index_set(self, key: object, value: object) -> None:
        from .setter import index_set
        index_set(self, key, value)

    def __getitem__(self, key: object) -> Any:
        return self.index(key)

    def __setitem__(self, key: object, value: object) -> None:
        self.index_set(key, value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over a snapshot: array elements, map pairs or characters.

        Raises NonIterable for every other kind.
        """
        kind = self._kind
        if kind is Kind.ARRAY:
            return iter(self._data.clone().items)
        if kind is Kind.MAP:
            return (Any(Pair(k, v)) for k, v in self._data.clone().items())
        if kind is Kind.STRING:
            return (Any(ch) for ch in self._data.value)
        raise NonIterable(kind)

    # -- Operators ------------------------------------------------------

    def _binary(self, other: object, op: Callable[[Any, Any], Any], reflected: bool = False) -> Any:
        rhs = other if isinstance(other, Any) else Any(other)
        return op(rhs, self) if reflected else op(self, rhs)

    def __add__(self, other: object) -> Any:
        from .ops import add
        return self._binary(other, add)

    def __radd__(self, other: object) -> Any:
        from .ops import add
        return self._binary(other, add, reflected=True)

    def __sub__(self, other: object) -> Any:
        from .ops import sub
        return self._binary(other, sub)

    def __rsub__(self, other: object) -> Any:
        from .ops import sub
        return self._binary(other, sub, reflected=True)

    def __mul__(self, other: object) -> Any:
        from .ops import mul
        return self._binary(other, mul)

    def __rmul__(self, other: object) -> Any:
        from .ops import mul
        return self._binary(other, mul, reflected=True)

    def __truediv__(self, other: object) -> Any:
        from .ops import div
        return self._binary(other, div)

    def __rtruediv__(self, other: object) -> Any:
        from .ops import div
        return self._binary(other, div, reflected=True)

    # Compound assignment rebinds to a freshly computed value.
    def __iadd__(self, other: object) -> Any:
        return self + other

    def __isub__(self, other: object) -> Any:
        return self - other

    def __imul__(self, other: object) -> Any:
        return self * other

    def __itruediv__(self, other: object) -> Any:
        return self / other

    def not_(self) -> Any:
        from .ops import not_
        return not_(self)

    def __invert__(self) -> Any:
        return self.not_()
