"""Runtime type tags for the value core."""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Kind: the tag carried by every Any
# ---------------------------------------------------------------------------

class Kind(Enum):
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    USIZE = "usize"
    F32 = "f32"
    F64 = "f64"
    STRING = "string"
    BOOL = "bool"
    ARRAY = "array"
    MAP = "map"
    PAIR = "pair"
    NULL = "null"
    FUNCTION = "function"
    EXTENSION = "extension"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Kind groups
# ---------------------------------------------------------------------------

INTEGER_KINDS = frozenset({
    Kind.I8, Kind.I16, Kind.I32, Kind.I64, Kind.ISIZE,
    Kind.U8, Kind.U16, Kind.U32, Kind.U64, Kind.USIZE,
})

FLOAT_KINDS = frozenset({Kind.F32, Kind.F64})

# Inclusive (min, max) per integer kind.  isize/usize are pointer width,
# which is 64 bits on every supported host.
INTEGER_RANGES: dict[Kind, tuple[int, int]] = {
    Kind.I8: (-(1 << 7), (1 << 7) - 1),
    Kind.I16: (-(1 << 15), (1 << 15) - 1),
    Kind.I32: (-(1 << 31), (1 << 31) - 1),
    Kind.I64: (-(1 << 63), (1 << 63) - 1),
    Kind.ISIZE: (-(1 << 63), (1 << 63) - 1),
    Kind.U8: (0, (1 << 8) - 1),
    Kind.U16: (0, (1 << 16) - 1),
    Kind.U32: (0, (1 << 32) - 1),
    Kind.U64: (0, (1 << 64) - 1),
    Kind.USIZE: (0, (1 << 64) - 1),
}

I64_MIN, I64_MAX = INTEGER_RANGES[Kind.I64]


# ---------------------------------------------------------------------------
# Coercion ladder
# ---------------------------------------------------------------------------

# Highest priority first.  Each rung lists the kinds that select it; the
# pointer-width kinds share the rung of their 64-bit counterpart.
LADDER: tuple[frozenset[Kind], ...] = (
    frozenset({Kind.STRING}),
    frozenset({Kind.F64}),
    frozenset({Kind.F32}),
    frozenset({Kind.I64, Kind.ISIZE}),
    frozenset({Kind.I32}),
    frozenset({Kind.I16}),
    frozenset({Kind.I8}),
    frozenset({Kind.U64, Kind.USIZE}),
    frozenset({Kind.U32}),
    frozenset({Kind.U16}),
    frozenset({Kind.U8}),
)


def ladder_rung(a: Kind, b: Kind) -> frozenset[Kind] | None:
    """Return the highest ladder rung held by either kind, or ``None``."""
    for rung in LADDER:
        if a in rung or b in rung:
            return rung
    return None


def wrap_i64(value: int) -> int:
    """Reinterpret an arbitrary int as a two's-complement 64-bit integer."""
    value &= (1 << 64) - 1
    if value > I64_MAX:
        value -= 1 << 64
    return value
