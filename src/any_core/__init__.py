"""any-core: a dynamically-typed value container with uniform operators."""

import logging

from .casting import AutoCast
from .containers import Array, Map, Pair
from .core import Any, null
from .errors import (
    AnyCoreError,
    BoundsError,
    DivisionByZero,
    NonIterable,
    ParseFailure,
)
from .function import Function
from .literals import array, function
from .model import Kind
from .ops import add, div, mul, not_, sub
from .values import Boolean, Float, Integer, Null, Text

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Any",
    "null",
    "Kind",
    "AutoCast",
    "Integer",
    "Float",
    "Text",
    "Boolean",
    "Null",
    "Array",
    "Map",
    "Pair",
    "Function",
    "array",
    "function",
    "add",
    "sub",
    "mul",
    "div",
    "not_",
    "AnyCoreError",
    "ParseFailure",
    "DivisionByZero",
    "NonIterable",
    "BoundsError",
]
