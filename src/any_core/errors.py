"""Hard failures raised by the value core.

Soft misses (absent keys, out-of-range reads, mismatched mutation) never
raise; they return the null value instead.  Everything below aborts the
enclosing operation.
"""

from __future__ import annotations


class AnyCoreError(Exception):
    """Base error for the value core."""


class ParseFailure(AnyCoreError, ValueError):
    """A string could not be decoded as a number."""

    def __init__(self, text: str, target: str) -> None:
        super().__init__(f"cannot parse {text!r} as {target}")
        self.text = text
        self.target = target


class DivisionByZero(AnyCoreError, ZeroDivisionError):
    """Integer division with a zero divisor."""

    def __init__(self, dividend: int) -> None:
        super().__init__(f"integer division of {dividend} by zero")
        self.dividend = dividend


class NonIterable(AnyCoreError, TypeError):
    """Iteration was requested on a kind without a sequence form."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"cannot iterate over a value of kind {kind}")
        self.kind = kind


class BoundsError(AnyCoreError, IndexError):
    """An array position that can never be written."""

    def __init__(self, position: int) -> None:
        super().__init__(f"array position {position} is out of bounds")
        self.position = position
