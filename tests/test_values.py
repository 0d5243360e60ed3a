"""Tests for scalar payloads and the casting helpers."""

import math

import pytest

from any_core import ParseFailure
from any_core.casting import float_to_i64, format_float, parse_float, parse_integer
from any_core.containers import Array, Map, Pair
from any_core.model import I64_MAX, I64_MIN, Kind
from any_core.values import Boolean, Float, Integer, Null, Text


# ---------------------------------------------------------------------------
# Integer
# ---------------------------------------------------------------------------

class TestInteger:
    def test_default_kind_is_i64(self):
        assert Integer(5).kind is Kind.I64

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            Integer(300, Kind.I8)
        with pytest.raises(ValueError):
            Integer(-1, Kind.U32)

    def test_non_integer_kind_rejected(self):
        with pytest.raises(ValueError):
            Integer(1, Kind.F64)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            Integer(True)

    def test_casts(self):
        i = Integer(-7, Kind.I16)
        assert i.to_integer() == -7
        assert i.to_float() == -7.0
        assert i.to_str() == "-7"
        assert i.to_boolean() is True
        assert Integer(0).to_boolean() is False

    def test_u64_reinterpreted_as_signed(self):
        assert Integer((1 << 64) - 1, Kind.U64).to_integer() == -1

    def test_to_array_wraps_value(self):
        arr = Integer(3).to_array()
        assert arr.length() == 1
        assert arr.items[0].to_integer() == 3

    def test_to_map_is_empty(self):
        assert Integer(3).to_map().is_empty()

    def test_to_pair_is_nulls(self):
        pair = Integer(3).to_pair()
        assert pair.first.is_null()
        assert pair.second.is_null()

    def test_to_function_returns_null(self):
        fn = Integer(3).to_function()
        assert fn.arity == 0
        assert fn.call(Array()).is_null()


# ---------------------------------------------------------------------------
# Float
# ---------------------------------------------------------------------------

class TestFloat:
    def test_f32_rounds_on_construction(self):
        f = Float(0.1, Kind.F32)
        assert f.value != 0.1
        assert f.to_str() == "0.1"

    def test_f64_keeps_precision(self):
        assert Float(0.1).to_str() == "0.1"

    def test_integral_renders_without_fraction(self):
        assert Float(15.0).to_str() == "15"

    def test_to_integer_truncates(self):
        assert Float(-2.9).to_integer() == -2
        assert Float(2.9).to_integer() == 2

    def test_nan_to_integer_is_zero(self):
        assert Float(math.nan).to_integer() == 0

    def test_to_boolean(self):
        assert Float(0.0).to_boolean() is False
        assert Float(0.5).to_boolean() is True

    def test_non_float_kind_rejected(self):
        with pytest.raises(ValueError):
            Float(1.0, Kind.I64)


class TestFormatFloat:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, "0.5"),
            (15.0, "15"),
            (-3.25, "-3.25"),
            (1e20, "100000000000000000000"),
            (1e-7, "0.0000001"),
            (-0.0, "-0"),
            (math.nan, "NaN"),
            (math.inf, "inf"),
            (-math.inf, "-inf"),
        ],
    )
    def test_rendering(self, value, expected):
        assert format_float(value) == expected


class TestFloatToI64:
    def test_saturates(self):
        assert float_to_i64(1e300) == I64_MAX
        assert float_to_i64(-1e300) == I64_MIN


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

class TestText:
    def test_parse_integer(self):
        assert Text("42").to_integer() == 42
        assert Text("-7").to_integer() == -7
        assert Text("+7").to_integer() == 7

    def test_parse_float(self):
        assert Text("2.5").to_float() == 2.5
        assert Text("1e3").to_float() == 1000.0
        assert math.isinf(Text("inf").to_float())

    def test_integer_parse_failure(self):
        with pytest.raises(ParseFailure):
            Text("abc").to_integer()

    def test_integer_rejects_fraction(self):
        with pytest.raises(ParseFailure):
            Text("1.5").to_integer()

    def test_integer_rejects_whitespace(self):
        with pytest.raises(ParseFailure):
            Text(" 1").to_integer()

    def test_float_parse_failure(self):
        with pytest.raises(ParseFailure):
            Text("abc").to_float()

    def test_parse_failure_is_value_error(self):
        with pytest.raises(ValueError):
            parse_integer("x")

    def test_integer_overflow_is_parse_failure(self):
        with pytest.raises(ParseFailure):
            parse_integer(str(1 << 64))

    def test_float_rejects_underscore(self):
        with pytest.raises(ParseFailure):
            parse_float("1_000")

    def test_boolean_is_total(self):
        assert Text("true").to_boolean() is True
        assert Text("false").to_boolean() is False
        assert Text("yes").to_boolean() is False
        assert Text("").to_boolean() is False


# ---------------------------------------------------------------------------
# Boolean / Null
# ---------------------------------------------------------------------------

class TestBoolean:
    def test_numeric_casts(self):
        assert Boolean(True).to_integer() == 1
        assert Boolean(False).to_integer() == 0
        assert Boolean(True).to_float() == 1.0

    def test_renders_lowercase(self):
        assert Boolean(True).to_str() == "true"
        assert Boolean(False).to_str() == "false"


class TestNullCasts:
    def test_numeric(self):
        assert Null.to_integer() == 0
        assert Null.to_float() == 0.0

    def test_to_boolean(self):
        assert Null.to_boolean() is False

    def test_to_array_is_empty(self):
        assert Null.to_array() == Array()

    def test_to_map_is_empty(self):
        assert Null.to_map() == Map()

    def test_to_pair(self):
        assert isinstance(Null.to_pair(), Pair)
