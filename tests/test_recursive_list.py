"""Tests for RecursiveList.

These cover:
1. Size bookkeeping and emptiness
2. Positional insertion, especially the predecessor walk used for relinking
3. Removal at the head, in the middle and at the tail
4. Lookup and search
5. Argument validation leaving the chain untouched
"""

import pytest

from structures.errors import (
    EmptyListError,
    ListError,
    ListIndexError,
    NullElementError,
)
from structures.recursive_list import RecursiveList


def as_list(lst):
    return list(lst)


class TestSize:
    def test_new_list_is_empty(self):
        lst = RecursiveList()
        assert lst.size() == 0
        assert lst.is_empty()
        assert len(lst) == 0
        assert as_list(lst) == []

    def test_size_tracks_insertions_and_removals(self):
        lst = RecursiveList()
        lst.insert_first("b").insert_last("c").insert_at(0, "a")
        assert lst.size() == 3
        lst.remove_last()
        lst.remove("a")
        assert lst.size() == 1
        assert not lst.is_empty()

    def test_iteration_visits_exactly_size_elements(self):
        lst = RecursiveList()
        operations = [
            lambda: lst.insert_last(1),
            lambda: lst.insert_first(0),
            lambda: lst.insert_at(1, 5),
            lambda: lst.remove_at(2),
            lambda: lst.insert_last(7),
            lambda: lst.remove_first(),
            lambda: lst.remove(7),
        ]
        for operation in operations:
            operation()
            assert len(as_list(lst)) == lst.size()


class TestInsertion:
    def test_insert_first_prepends(self):
        lst = RecursiveList()
        lst.insert_first(3)
        lst.insert_first(2)
        lst.insert_first(1)
        assert as_list(lst) == [1, 2, 3]

    def test_insert_last_appends(self, numbers):
        numbers.insert_last(4)
        assert as_list(numbers) == [1, 2, 3, 4]

    def test_insert_returns_list_for_chaining(self):
        lst = RecursiveList()
        assert lst.insert_first(1) is lst
        assert lst.insert_last(2) is lst
        assert lst.insert_at(1, 9) is lst

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_insert_at_then_get_returns_element(self, numbers, index):
        numbers.insert_at(index, 99)
        assert numbers.get(index) == 99
        assert numbers.size() == 4

    def test_insert_at_middle_keeps_neighbours(self, numbers):
        numbers.insert_at(1, 10)
        assert as_list(numbers) == [1, 10, 2, 3]

    def test_insert_at_size_matches_insert_last(self, numbers):
        other = RecursiveList()
        for value in (1, 2, 3):
            other.insert_last(value)

        numbers.insert_at(numbers.size(), 4)
        other.insert_last(4)
        assert as_list(numbers) == as_list(other)
        assert numbers.get_last() == 4

    def test_insert_at_into_empty_list(self):
        lst = RecursiveList()
        lst.insert_at(0, "only")
        assert lst.get_first() == "only"
        assert lst.get_last() == "only"

    def test_falsy_elements_are_accepted(self):
        lst = RecursiveList()
        lst.insert_last(0).insert_last("").insert_last(False)
        assert as_list(lst) == [0, "", False]


class TestRemoval:
    def test_remove_first_on_single_element_empties_list(self):
        lst = RecursiveList()
        lst.insert_first("x")
        assert lst.remove_first() == "x"
        assert lst.is_empty()
        assert as_list(lst) == []

    def test_remove_last_detaches_tail(self, numbers):
        assert numbers.remove_last() == 3
        assert as_list(numbers) == [1, 2]
        assert numbers.get_last() == 2
        numbers.insert_last(4)
        assert as_list(numbers) == [1, 2, 4]

    def test_remove_last_until_empty(self, numbers):
        assert [numbers.remove_last() for _ in range(3)] == [3, 2, 1]
        assert numbers.is_empty()

    def test_remove_at_interior(self, numbers):
        assert numbers.remove_at(1) == 2
        assert as_list(numbers) == [1, 3]

    def test_remove_at_final_index(self, numbers):
        assert numbers.remove_at(2) == 3
        assert as_list(numbers) == [1, 2]
        assert numbers.size() == 2

    def test_remove_takes_lowest_index_occurrence(self):
        lst = RecursiveList()
        for value in ("a", "b", "a", "c"):
            lst.insert_last(value)
        assert lst.remove("a") is True
        assert as_list(lst) == ["b", "a", "c"]

    def test_remove_missing_element_returns_false(self, numbers):
        assert numbers.remove(9) is False
        assert as_list(numbers) == [1, 2, 3]

    def test_remove_uses_equality_not_identity(self):
        lst = RecursiveList()
        lst.insert_last([1, 2])
        assert lst.remove([1, 2]) is True
        assert lst.is_empty()


class TestLookup:
    def test_get_each_index(self, numbers):
        assert [numbers.get(i) for i in range(numbers.size())] == [1, 2, 3]

    def test_get_is_idempotent(self, numbers):
        assert numbers.get(1) == numbers.get(1)
        assert as_list(numbers) == [1, 2, 3]

    def test_get_first_and_last(self, numbers):
        assert numbers.get_first() == 1
        assert numbers.get_last() == 3

    def test_index_of_found_and_missing(self, numbers):
        assert numbers.index_of(1) == 0
        assert numbers.index_of(3) == 2
        assert numbers.index_of(42) == -1

    def test_index_of_returns_first_match(self):
        lst = RecursiveList()
        for value in (5, 6, 5):
            lst.insert_last(value)
        assert lst.index_of(5) == 0

    def test_repr_lists_elements(self, numbers):
        assert repr(numbers) == "RecursiveList([1, 2, 3])"


class TestScenario:
    def test_insert_remove_search_walkthrough(self):
        lst = RecursiveList()
        lst.insert_last(1)
        lst.insert_last(2)
        lst.insert_last(3)
        assert as_list(lst) == [1, 2, 3]
        assert lst.size() == 3

        assert lst.remove_at(1) == 2
        assert as_list(lst) == [1, 3]
        assert lst.size() == 2

        assert lst.index_of(3) == 1
        assert lst.remove(9) is False
        assert as_list(lst) == [1, 3]


class TestErrors:
    @pytest.mark.parametrize("index", [-1, 3])
    def test_get_out_of_bounds(self, numbers, index):
        with pytest.raises(ListIndexError):
            numbers.get(index)
        assert numbers.size() == 3

    def test_bounds_error_is_an_index_error(self, numbers):
        with pytest.raises(IndexError):
            numbers.get(numbers.size())

    @pytest.mark.parametrize("index", [-1, 4])
    def test_insert_at_out_of_bounds_leaves_list_unchanged(self, numbers, index):
        with pytest.raises(ListIndexError):
            numbers.insert_at(index, 7)
        assert as_list(numbers) == [1, 2, 3]

    @pytest.mark.parametrize("index", [-1, 3])
    def test_remove_at_out_of_bounds_leaves_list_unchanged(self, numbers, index):
        with pytest.raises(ListIndexError):
            numbers.remove_at(index)
        assert as_list(numbers) == [1, 2, 3]

    def test_non_integer_index(self, numbers):
        with pytest.raises(TypeError):
            numbers.get("1")

    @pytest.mark.parametrize(
        "call",
        [
            lambda lst: lst.insert_first(None),
            lambda lst: lst.insert_last(None),
            lambda lst: lst.insert_at(0, None),
            lambda lst: lst.remove(None),
            lambda lst: lst.index_of(None),
        ],
    )
    def test_none_element_rejected(self, numbers, call):
        with pytest.raises(NullElementError):
            call(numbers)
        assert as_list(numbers) == [1, 2, 3]

    def test_null_check_precedes_bounds_check(self, numbers):
        with pytest.raises(NullElementError):
            numbers.insert_at(99, None)

    @pytest.mark.parametrize(
        "call",
        [
            lambda lst: lst.remove_first(),
            lambda lst: lst.remove_last(),
            lambda lst: lst.get_first(),
            lambda lst: lst.get_last(),
        ],
    )
    def test_empty_list_accessors(self, call):
        lst = RecursiveList()
        with pytest.raises(EmptyListError):
            call(lst)
        assert lst.is_empty()

    def test_all_errors_share_a_base(self):
        lst = RecursiveList()
        for call in (lambda: lst.get(0), lambda: lst.get_first(), lambda: lst.insert_last(None)):
            with pytest.raises(ListError):
                call()

    @pytest.mark.parametrize(
        "call",
        [
            lambda lst: lst.get(0),
            lambda lst: lst.remove_at(0),
        ],
    )
    def test_positional_access_on_empty_list_is_a_bounds_error(self, call):
        lst = RecursiveList()
        with pytest.raises(ListIndexError):
            call(lst)
        assert lst.is_empty()
        assert as_list(lst) == []

    @pytest.mark.parametrize(
        "call",
        [
            lambda lst: lst.get(True),
            lambda lst: lst.remove_at(False),
            lambda lst: lst.insert_at(False, 0),
        ],
    )
    def test_bool_index_rejected(self, numbers, call):
        with pytest.raises(TypeError):
            call(numbers)
        assert as_list(numbers) == [1, 2, 3]
