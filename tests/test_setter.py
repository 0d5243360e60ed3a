"""Tests for index writes."""

import pytest

from any_core import Any, BoundsError
from any_core.setter import MAX_GROWTH, index_set


def test_array_overwrite():
    a = Any([1, 2, 3])
    a[1] = Any("x")
    assert a == Any([1, "x", 3])


def test_array_write_past_end_grows():
    a = Any([1])
    a[3] = 4
    assert a == Any([1, None, None, 4])
    assert len(a) == 4


def test_array_write_at_length_appends():
    a = Any([1])
    a[1] = 2
    assert a == Any([1, 2])


def test_array_negative_write_raises():
    with pytest.raises(BoundsError):
        Any([1])[-1] = 0


def test_bounds_error_is_index_error():
    with pytest.raises(IndexError):
        index_set(Any([]), -5, 1)


def test_array_write_far_past_end_raises():
    a = Any([1])
    with pytest.raises(BoundsError):
        a[10**12] = 1
    with pytest.raises(BoundsError):
        a[MAX_GROWTH + 2] = 1
    assert a == Any([1])


def test_array_write_stores_copy():
    x = Any([])
    a = Any([None, None])
    a[0] = x
    a[1] = x
    x.push(1)
    a[0].push(2)
    assert a.to_str() == "[[2], []]"


def test_array_write_self():
    a = Any([1])
    a[1] = a
    assert a == Any([1, [1]])


def test_map_write_inserts():
    m = Any({})
    m[Any(1)] = Any(1)
    m[Any(2)] = Any(2)
    m[3] = Any(3)
    assert m[Any(1)] == Any(1)
    assert m[Any(2)] == Any(2)
    assert m[Any(3)] == Any(3)
    assert m[Any(4)].is_null()


def test_map_write_overwrites():
    m = Any({"k": 1})
    m["k"] = 2
    assert m == Any({"k": 2})
    assert len(m) == 1


def test_map_written_key_is_present():
    m = Any({})
    m["k"] = None
    assert len(m) == 1
    assert m.get("k").is_null()


def test_map_write_stores_copy():
    v = Any([1])
    m = Any({})
    m["k"] = v
    v.push(2)
    assert m["k"] == Any([1])


@pytest.mark.parametrize("value", [5, "abc", None, True])
def test_other_kinds_ignore_writes(value):
    v = Any(value)
    v[0] = 1
    assert v == Any(value)


def test_nested_write():
    m = Any({"xs": [1]})
    m["xs"][0] = 9
    assert m == Any({"xs": [9]})
