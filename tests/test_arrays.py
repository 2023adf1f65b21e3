"""Unit tests for array helpers."""

import pytest

from lodash_compat.utils.arrays import (
    drop_right,
    filter_,
    find_index,
    first,
    flatten,
    group_by,
    in_range,
    includes,
    map_,
    min_,
    range_,
    some,
    sort_by,
    times,
)


def test_first() -> None:
    assert first([3, 4]) == 3
    assert first([]) is None
    assert first(None) is None


class TestInRange:
    def test_two_bounds(self) -> None:
        assert in_range(3, 2, 4) is True
        assert in_range(4, 2, 4) is False
        assert in_range(2, 2, 4) is True

    def test_single_bound_means_from_zero(self) -> None:
        assert in_range(4, 8) is True
        assert in_range(8, 8) is False
        assert in_range(-1, 8) is False

    def test_reversed_bounds_are_swapped(self) -> None:
        assert in_range(-3, -2, -6) is True
        assert in_range(1.2, 2) is True


def test_times() -> None:
    assert times(3, lambda i: i * i) == [0, 1, 4]
    assert times(0, lambda i: i) == []
    assert times(-2, lambda i: i) == []


def test_flatten_one_level() -> None:
    assert flatten([1, [2, [3, 4]], (5,)]) == [1, 2, [3, 4], 5]
    assert flatten(["ab", "c"]) == ["ab", "c"]


@pytest.mark.parametrize(
    ("n", "expected"),
    [(1, [1, 2]), (2, [1]), (3, []), (5, []), (0, [1, 2, 3])],
)
def test_drop_right(n: int, expected: list[int]) -> None:
    assert drop_right([1, 2, 3], n) == expected


def test_drop_right_default() -> None:
    assert drop_right([1, 2, 3]) == [1, 2]


class TestIteratees:
    def test_single_argument_callbacks(self) -> None:
        assert filter_([1, 2, 3, 4], lambda v: v % 2 == 0) == [2, 4]
        assert map_([1, 2], lambda v: v * 10) == [10, 20]
        assert some([0, 0, 1], bool) is True
        assert find_index(["a", "b"], lambda v: v == "b") == 1

    def test_callbacks_receive_index_and_collection(self) -> None:
        seq = ["a", "b", "c"]

        assert map_(seq, lambda v, i: f"{i}:{v}") == ["0:a", "1:b", "2:c"]
        assert filter_(seq, lambda v, i, s: i < len(s) - 1) == ["a", "b"]

    def test_find_index_missing(self) -> None:
        assert find_index([1, 2], lambda v: v > 5) == -1
        assert find_index([], lambda v: True) == -1

    def test_some_empty(self) -> None:
        assert some([], lambda v: True) is False

    def test_varargs_callback_gets_all_arguments(self) -> None:
        assert map_(["x"], lambda *args: len(args)) == [3]


def test_includes() -> None:
    assert includes([1, 2], 2) is True
    assert includes([1, 2], 3) is False


def test_min() -> None:
    assert min_([3, 1, 2]) == 1
    assert min_([]) is None


class TestRange:
    def test_single_argument(self) -> None:
        assert range_(4) == [0, 1, 2, 3]
        assert range_(-4) == [0, -1, -2, -3]

    def test_start_end_step(self) -> None:
        assert range_(1, 5) == [1, 2, 3, 4]
        assert range_(0, 20, 5) == [0, 5, 10, 15]
        assert range_(0, -4, -1) == [0, -1, -2, -3]

    def test_float_step(self) -> None:
        assert range_(0, 1, 0.25) == [0, 0.25, 0.5, 0.75]

    def test_zero_step_repeats_start(self) -> None:
        assert range_(1, 4, 0) == [1, 1, 1]

    def test_empty_ranges(self) -> None:
        assert range_(0) == []
        assert range_(0, 5, -1) == []


def test_group_by_callable_and_path() -> None:
    words = ["one", "two", "three"]

    assert group_by(words, len) == {3: ["one", "two"], 5: ["three"]}

    people = [{"team": "a", "n": 1}, {"team": "b", "n": 2}, {"team": "a", "n": 3}]
    assert group_by(people, "team") == {
        "a": [{"team": "a", "n": 1}, {"team": "a", "n": 3}],
        "b": [{"team": "b", "n": 2}],
    }


class TestSortBy:
    def test_by_path_and_callable(self) -> None:
        users = [
            {"user": "fred", "age": 48},
            {"user": "barney", "age": 36},
            {"user": "fred", "age": 40},
        ]

        assert sort_by(users, "user", lambda u: u["age"]) == [
            {"user": "barney", "age": 36},
            {"user": "fred", "age": 40},
            {"user": "fred", "age": 48},
        ]

    def test_is_stable(self) -> None:
        items = [("b", 1), ("a", 2), ("b", 0)]

        assert sort_by(items, lambda item: item[0]) == [("a", 2), ("b", 1), ("b", 0)]

    def test_none_keys_sort_last(self) -> None:
        rows = [{"v": None}, {"v": 2}, {"v": 1}]

        assert sort_by(rows, "v") == [{"v": 1}, {"v": 2}, {"v": None}]

    def test_without_keys(self) -> None:
        assert sort_by([3, 1, 2]) == [1, 2, 3]
