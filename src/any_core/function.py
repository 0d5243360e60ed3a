"""Function: an invocable value wrapping a host callable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .casting import AutoCast
from .containers import Array, _coerce

if TYPE_CHECKING:
    from .core import Any


@dataclass(frozen=True, slots=True, eq=False)
class Function(AutoCast):
    """Shared handle to a callable taking one Array-valued argument.

    ``arity`` records how many named parameters the callable expects.  It is
    informational only: callers may pass any number of elements and the
    callable does its own bounds checking.

    Clones share the callable, so state captured by a closure stays coherent
    across every copy of the value.
    """

    fn: Callable[[Any], object]
    arity: int = 0

    def call(self, args: object) -> Any:
        return _coerce(self.fn(_coerce(args)))

    def clone(self) -> Function:
        return Function(self.fn, self.arity)

    def to_integer(self) -> int:
        return 0

    def to_float(self) -> float:
        return 0.0

    def to_str(self) -> str:
        return "function"

    def to_boolean(self) -> bool:
        return False

    def to_array(self) -> Array:
        return Array()

    def to_function(self) -> Function:
        return self.clone()
