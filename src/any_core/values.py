"""Scalar payload kinds for the value core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .casting import (
    AutoCast,
    float_to_i64,
    format_float,
    parse_boolean,
    parse_float,
    parse_integer,
    to_f32,
)
from .model import FLOAT_KINDS, INTEGER_KINDS, INTEGER_RANGES, Kind, wrap_i64

if TYPE_CHECKING:
    from .containers import Array


@dataclass(frozen=True, slots=True)
class Integer(AutoCast):
    value: int
    kind: Kind = Kind.I64

    def __post_init__(self) -> None:
        if self.kind not in INTEGER_KINDS:
            raise ValueError(f"{self.kind} is not an integer kind")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"expected int, got {type(self.value).__name__}")
        lo, hi = INTEGER_RANGES[self.kind]
        if not lo <= self.value <= hi:
            raise ValueError(f"{self.value} is out of range for {self.kind}")

    def to_integer(self) -> int:
        return wrap_i64(self.value)

    def to_float(self) -> float:
        return float(self.value)

    def to_str(self) -> str:
        return str(self.value)

    def to_boolean(self) -> bool:
        return self.value != 0


@dataclass(frozen=True, slots=True)
class Float(AutoCast):
    value: float
    kind: Kind = Kind.F64

    def __post_init__(self) -> None:
        if self.kind not in FLOAT_KINDS:
            raise ValueError(f"{self.kind} is not a float kind")
        value = float(self.value)
        if self.kind is Kind.F32:
            value = to_f32(value)
        object.__setattr__(self, "value", value)

    def to_integer(self) -> int:
        return float_to_i64(self.value)

    def to_float(self) -> float:
        return self.value

    def to_str(self) -> str:
        return format_float(self.value, single=self.kind is Kind.F32)

    def to_boolean(self) -> bool:
        return self.value != 0.0


@dataclass(frozen=True, slots=True)
class Text(AutoCast):
    value: str

    def to_integer(self) -> int:
        return parse_integer(self.value)

    def to_float(self) -> float:
        return parse_float(self.value)

    def to_str(self) -> str:
        return self.value

    def to_boolean(self) -> bool:
        return parse_boolean(self.value)


@dataclass(frozen=True, slots=True)
class Boolean(AutoCast):
    value: bool

    def to_integer(self) -> int:
        return 1 if self.value else 0

    def to_float(self) -> float:
        return 1.0 if self.value else 0.0

    def to_str(self) -> str:
        return "true" if self.value else "false"

    def to_boolean(self) -> bool:
        return self.value


class _NullType(AutoCast):
    """Singleton payload for the null kind."""

    __slots__ = ()

    _instance: "_NullType | None" = None

    def __new__(cls) -> "_NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def to_integer(self) -> int:
        return 0

    def to_float(self) -> float:
        return 0.0

    def to_str(self) -> str:
        return "null"

    def to_boolean(self) -> bool:
        return False

    def to_array(self) -> Array:
        from .containers import Array
        return Array()


Null = _NullType()
