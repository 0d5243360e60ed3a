"""Collection payloads: Array, Map and Pair."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from .casting import AutoCast

if TYPE_CHECKING:
    from .core import Any


def _coerce(value: object) -> Any:
    """Wrap a host value in an Any; Any instances pass through unchanged."""
    from .core import Any
    return value if isinstance(value, Any) else Any(value)


def _own(value: object) -> Any:
    """Like _coerce, but an Any is cloned so the container holds its own copy."""
    from .core import Any
    return value.clone() if isinstance(value, Any) else Any(value)


# ---------------------------------------------------------------------------
# Array
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Array(AutoCast):
    """Ordered, index-addressable sequence of values."""

    items: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = [_own(v) for v in self.items]

    # -- Sequence operations --------------------------------------------

    def push(self, value: object) -> None:
        self.items.append(_own(value))

    def pop(self) -> Any | None:
        return self.items.pop() if self.items else None

    def shift(self) -> Any | None:
        return self.items.pop(0) if self.items else None

    def unshift(self, value: object) -> None:
        self.items.insert(0, _own(value))

    def length(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def reverse(self) -> Array:
        self.items.reverse()
        return self

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    # -- AutoCast -------------------------------------------------------

    def to_integer(self) -> int:
        return 0

    def to_float(self) -> float:
        return 0.0

    def to_str(self) -> str:
        return "[" + ", ".join(v.to_str() for v in self.items) + "]"

    def to_boolean(self) -> bool:
        return bool(self.items)

    def to_array(self) -> Array:
        return self.clone()

    def to_pair(self) -> Pair:
        from .core import null
        first = self.items[0] if len(self.items) > 0 else null()
        second = self.items[1] if len(self.items) > 1 else null()
        return Pair(first, second)

    def clone(self) -> Array:
        return Array(list(self.items))


# ---------------------------------------------------------------------------
# Map
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Map(AutoCast):
    """Key-unique associative container keyed by value."""

    entries: dict[Any, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        entries, self.entries = self.entries, {}
        for key, value in entries.items():
            self.set(key, value)

    def set(self, key: object, value: object) -> None:
        """Insert or overwrite.  Key and value are cloned so the table owns them."""
        self.entries[_own(key)] = _own(value)

    def get(self, key: object) -> Any | None:
        return self.entries.get(_coerce(key))

    def get_mut(self, key: object) -> Any | None:
        """Same lookup as :meth:`get`; the returned value is stored in place."""
        return self.entries.get(_coerce(key))

    def delete(self, key: object) -> Any | None:
        return self.entries.pop(_coerce(key), None)

    def length(self) -> int:
        return len(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield (key, value); keys are copies, values are the stored ones."""
        return ((k.clone(), v) for k, v in self.entries.items())

    # -- AutoCast -------------------------------------------------------

    def to_integer(self) -> int:
        return 0

    def to_float(self) -> float:
        return 0.0

    def to_str(self) -> str:
        body = ", ".join(f"{k.to_str()}: {v.to_str()}" for k, v in self.entries.items())
        return "{" + body + "}"

    def to_boolean(self) -> bool:
        return bool(self.entries)

    def to_array(self) -> Array:
        return Array()

    def to_map(self) -> Map:
        return self.clone()

    def clone(self) -> Map:
        return Map(dict(self.entries))


# ---------------------------------------------------------------------------
# Pair
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Pair(AutoCast):
    """Immutable two-element tuple of values."""

    first: Any
    second: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", _own(self.first))
        object.__setattr__(self, "second", _own(self.second))

    def to_tuple(self) -> tuple[Any, Any]:
        return (self.first.clone(), self.second.clone())

    def to_integer(self) -> int:
        return 0

    def to_float(self) -> float:
        return 0.0

    def to_str(self) -> str:
        return f"({self.first.to_str()}, {self.second.to_str()})"

    def to_boolean(self) -> bool:
        return True

    def to_pair(self) -> Pair:
        return self.clone()

    def clone(self) -> Pair:
        return Pair(self.first, self.second)
