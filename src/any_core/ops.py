"""Operator dispatch: arithmetic and logical operators over two values.

Dispatch order for ``add``/``sub``/``mul``/``div``:

1. null on either side → null
2. same tag → kind-specific operation
3. mixed tags → the highest coercion-ladder rung present on either side
   decides how both operands are decoded
4. no rung at all → string concatenation for ``add``, NaN otherwise

Integer results are tagged i64 and float results f64, whatever the width of
the operands.
"""

from __future__ import annotations

import logging
import math

from .containers import Array
from .core import Any, null
from .errors import DivisionByZero
from .model import FLOAT_KINDS, INTEGER_KINDS, Kind, ladder_rung, wrap_i64
from .values import Float, Integer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def add(left: Any, right: Any) -> Any:
    return _arith("add", left, right)


def sub(left: Any, right: Any) -> Any:
    return _arith("sub", left, right)


def mul(left: Any, right: Any) -> Any:
    return _arith("mul", left, right)


def div(left: Any, right: Any) -> Any:
    """Divide; integers truncate toward zero and reject a zero divisor."""
    return _arith("div", left, right)


def not_(value: Any) -> Any:
    """Logical negation of ``to_boolean()``; null stays null."""
    if value.is_null():
        return null()
    return Any(not value.to_boolean())


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _arith(op: str, left: Any, right: Any) -> Any:
    if left.is_null() or right.is_null():
        return null()

    lk, rk = left.kind, right.kind
    if lk is rk:
        return _same_kind(op, left, right)

    rung = ladder_rung(lk, rk)
    if rung is None or Kind.STRING in rung:
        return _concat_or_nan(op, left, right)
    if rung & FLOAT_KINDS:
        return _float_op(op, left.to_float(), right.to_float())
    return _int_op(op, left.to_integer(), right.to_integer())


def _same_kind(op: str, left: Any, right: Any) -> Any:
    kind = left.kind
    if kind in INTEGER_KINDS:
        return _int_op(op, left.to_integer(), right.to_integer())
    if kind in FLOAT_KINDS:
        return _float_op(op, left.to_float(), right.to_float())
    if op != "add":
        return _poison(op, left, right)
    if kind is Kind.BOOL:
        return Any(left.to_boolean() or right.to_boolean())
    if kind is Kind.ARRAY:
        return Any(Array(left.to_array().items + right.to_array().items))
    return Any(left.to_str() + right.to_str())


def _concat_or_nan(op: str, left: Any, right: Any) -> Any:
    if op == "add":
        return Any(left.to_str() + right.to_str())
    return _poison(op, left, right)


def _poison(op: str, left: Any, right: Any) -> Any:
    logger.debug("%s on %s and %s is unsupported; result is NaN", op, left.kind, right.kind)
    return Any(Float(math.nan))


# ---------------------------------------------------------------------------
# Numeric kernels
# ---------------------------------------------------------------------------

def _int_op(op: str, a: int, b: int) -> Any:
    if op == "add":
        result = a + b
    elif op == "sub":
        result = a - b
    elif op == "mul":
        result = a * b
    else:
        result = _int_div_trunc(a, b)
    return Any(Integer(wrap_i64(result)))


def _float_op(op: str, a: float, b: float) -> Any:
    if op == "add":
        result = a + b
    elif op == "sub":
        result = a - b
    elif op == "mul":
        result = a * b
    else:
        result = _float_div(a, b)
    return Any(Float(result))


def _int_div_trunc(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero(a)
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b
