"""Capability traits: the conversions every storable kind supplies.

Every payload held by an :class:`~any_core.core.Any` is an :class:`AutoCast`.
The four scalar casts are abstract; the container casts have defaults that
match what most kinds want (wrap in a one-element array, empty map, a pair
of nulls, a function that returns null).
"""

from __future__ import annotations

import math
import re
import struct
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from .errors import ParseFailure
from .model import I64_MAX, I64_MIN

if TYPE_CHECKING:
    from .containers import Array, Map, Pair
    from .function import Function


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# AutoCast
# ---------------------------------------------------------------------------

class AutoCast(ABC):
    """Conversion contract shared by all payload kinds."""

    __slots__ = ()

    @abstractmethod
    def to_integer(self) -> int:
        ...

    @abstractmethod
    def to_float(self) -> float:
        ...

    @abstractmethod
    def to_str(self) -> str:
        ...

    @abstractmethod
    def to_boolean(self) -> bool:
        ...

    def to_array(self) -> Array:
        from .containers import Array
        from .core import Any
        return Array([Any(self.clone())])

    def to_map(self) -> Map:
        from .containers import Map
        return Map()

    def to_pair(self) -> Pair:
        from .containers import Pair
        from .core import null
        return Pair(null(), null())

    def to_function(self) -> Function:
        from .function import Function
        from .core import null
        return Function(lambda _args: null(), 0)

    def clone(self) -> AutoCast:
        """Return an independent copy.  Immutable payloads return themselves."""
        return self

    def __str__(self) -> str:
        return self.to_str()


# ---------------------------------------------------------------------------
# String decoding
# ---------------------------------------------------------------------------

def parse_integer(text: str) -> int:
    """Decode *text* as a signed 64-bit integer or raise ParseFailure."""
    if not _INTEGER_RE.fullmatch(text):
        raise ParseFailure(text, "integer")
    value = int(text)
    if not I64_MIN <= value <= I64_MAX:
        raise ParseFailure(text, "integer")
    return value


def parse_float(text: str) -> float:
    """Decode *text* as a 64-bit float or raise ParseFailure."""
    if not _FLOAT_RE.fullmatch(text):
        raise ParseFailure(text, "float")
    return float(text)


def parse_boolean(text: str) -> bool:
    """Total boolean decoding: only the exact text ``true`` is true."""
    return text == "true"


# ---------------------------------------------------------------------------
# Numeric helpers
# ---------------------------------------------------------------------------

def to_f32(value: float) -> float:
    """Round *value* to the nearest single-precision float."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def float_to_i64(value: float) -> int:
    """Truncate toward zero, saturating at the i64 bounds; NaN is 0."""
    if math.isnan(value):
        return 0
    if value >= I64_MAX:
        return I64_MAX
    if value <= I64_MIN:
        return I64_MIN
    return int(value)


def format_float(value: float, single: bool = False) -> str:
    """Render a float the way the value core prints numbers.

    Shortest round-trip digits, never an exponent, and integral values
    without a fractional part: ``15``, ``0.5``, ``-0``, ``NaN``, ``inf``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    digits = repr(value)
    if single:
        for precision in range(1, 10):
            candidate = f"{value:.{precision}g}"
            if to_f32(float(candidate)) == value:
                digits = candidate
                break

    text = format(Decimal(digits), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("0", "-0"):
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    return text
