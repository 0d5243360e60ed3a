"""Literal construction helpers for arrays and functions."""

from __future__ import annotations

import inspect
from typing import Callable

from .containers import Array
from .core import Any
from .function import Function

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def array(*values: object) -> Any:
    """Build an array value from host values, preserving their order.

    Example::

        array(1, "two", 3.0)   # → Any(array: [1, two, 3])
    """
    return Any(Array(list(values)))


def function(body: Callable[..., object]) -> Any:
    """Build a function value from a host callable with named parameters.

    Parameter *i* of *body* is bound to element *i* of the argument array;
    parameters beyond the array's length receive null.  The declared arity
    is the number of positional parameters.  Usable as a decorator::

        @function
        def add(lhs, rhs):
            return lhs + rhs

        add(array(1, 2))   # → Any(i64: 3)
    """
    arity = sum(
        1 for p in inspect.signature(body).parameters.values() if p.kind in _POSITIONAL
    )

    def invoke(args: Any) -> object:
        return body(*(args[i].clone() for i in range(arity)))

    return Any(Function(invoke, arity))
