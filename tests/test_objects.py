"""Unit tests for object helpers."""

from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from lodash_compat.utils.objects import get, is_equal, noop, omit, pick_by, to_path


class TestGet:
    def test_dotted_path(self) -> None:
        assert get({"a": {"b": 1}}, "a.b") == 1

    def test_missing_path_returns_default(self) -> None:
        assert get({}, "a.b", 0) == 0

    def test_missing_list_path_returns_none(self) -> None:
        assert get({}, ["a", "b"]) is None

    def test_sequence_index_segments(self) -> None:
        data = {"items": [{"name": "first"}, {"name": "second"}]}

        assert get(data, "items.1.name") == "second"
        assert get(data, ["items", 0, "name"]) == "first"
        assert get(data, "items.5.name", "none") == "none"

    def test_attribute_access(self) -> None:
        obj = SimpleNamespace(config=SimpleNamespace(port=8080))

        assert get(obj, "config.port") == 8080
        assert get(obj, "config.host", "localhost") == "localhost"

    def test_none_value_yields_default(self) -> None:
        assert get({"a": None}, "a", "fallback") == "fallback"
        assert get({"a": None}, "a.b", "fallback") == "fallback"

    def test_falsy_values_are_returned(self) -> None:
        assert get({"a": 0}, "a", 5) == 0
        assert get({"a": ""}, "a", "x") == ""
        assert get({"a": False}, "a", True) is False

    def test_integer_keys_in_mappings(self) -> None:
        assert get({1: {"x": "one"}}, "1.x") == "one"

    def test_none_root_returns_default(self) -> None:
        assert get(None, "a", "d") == "d"


def test_to_path() -> None:
    assert to_path("a.b.c") == ["a", "b", "c"]
    assert to_path(["a", 0]) == ["a", 0]
    assert to_path(3) == [3]


def test_pick_by() -> None:
    data = {"a": 1, "b": None, "c": 3}

    assert pick_by(data, lambda value, key: value is not None) == {"a": 1, "c": 3}
    assert pick_by(data, lambda value, key: key == "b") == {"b": None}


def test_omit() -> None:
    data = {"a": 1, "b": 2, "c": 3}

    assert omit(data, ["a", "c"]) == {"b": 2}
    assert omit(data, "b") == {"a": 1, "c": 3}
    assert data == {"a": 1, "b": 2, "c": 3}


@dataclass
class Point:
    x: int
    y: int


class Plain:
    def __init__(self, value: object) -> None:
        self.value = value


class TestIsEqual:
    def test_nested_structures(self) -> None:
        assert is_equal({"a": [1, {"b": 2}]}, {"a": [1, {"b": 2}]}) is True
        assert is_equal({"a": [1, {"b": 2}]}, {"a": [1, {"b": 3}]}) is False

    def test_mapping_order_is_ignored(self) -> None:
        assert is_equal({"a": 1, "b": 2}, {"b": 2, "a": 1}) is True

    def test_nan_equals_nan(self) -> None:
        assert is_equal(float("nan"), float("nan")) is True
        assert is_equal([float("nan")], [float("nan")]) is True

    def test_list_and_tuple_differ(self) -> None:
        assert is_equal([1, 2], (1, 2)) is False

    @pytest.mark.parametrize(("a", "b"), [([1], [1, 2]), ({"a": 1}, {"b": 1}), (1, "1")])
    def test_mismatches(self, a: object, b: object) -> None:
        assert is_equal(a, b) is False

    def test_plain_objects_compare_by_attributes(self) -> None:
        assert is_equal(Plain([1, 2]), Plain([1, 2])) is True
        assert is_equal(Plain(1), Plain(2)) is False

    def test_dataclasses_use_their_eq(self) -> None:
        assert is_equal(Point(1, 2), Point(1, 2)) is True


def test_noop() -> None:
    assert noop() is None
    assert noop(1, 2, key="value") is None
