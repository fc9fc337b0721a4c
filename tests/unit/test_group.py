"""Тесты для Group.

Coverage:
- add/delete/has
- Фабрика from_iterable (порядок первого вхождения, отбрасывание дубликатов)
- HASHED membership index (hashable и unhashable значения)
- Python protocol: len, in, ==, repr
"""

import logging

import pytest

from src.core.collections import (
    Group,
    GroupConfig,
    IterationMode,
    MembershipIndex,
)


@pytest.fixture(params=[MembershipIndex.SCAN, MembershipIndex.HASHED])
def config(request) -> GroupConfig:
    """Оба режима membership должны давать одинаковое наблюдаемое поведение."""
    return GroupConfig(membership_index=request.param)


class TestGroupOperations:
    """Тесты add/delete/has."""

    def test_new_group_is_empty(self, config):
        g = Group(config)

        assert g.size == 0
        assert len(g) == 0
        assert list(g) == []

    def test_add_then_has(self, config):
        g = Group(config)
        g.add("x")

        assert g.has("x")
        assert not g.has("y")

    def test_add_then_delete(self, config):
        g = Group(config)
        g.add("x")
        g.delete("x")

        assert not g.has("x")
        assert g.size == 0

    def test_add_twice_is_idempotent(self, config):
        once = Group(config)
        once.add(42)

        twice = Group(config)
        twice.add(42)
        twice.add(42)

        assert twice == once
        assert list(twice) == [42]

    def test_delete_absent_is_noop(self, config):
        g = Group.from_iterable([1, 2, 3], config)
        g.delete(99)

        assert list(g) == [1, 2, 3]

    def test_delete_keeps_order_of_remaining(self, config):
        g = Group.from_iterable(["a", "b", "c", "d"], config)
        g.delete("b")

        assert list(g) == ["a", "c", "d"]

    def test_readd_after_delete_goes_to_end(self, config):
        g = Group.from_iterable(["a", "b", "c"], config)
        g.delete("a")
        g.add("a")

        assert list(g) == ["b", "c", "a"]

    def test_numbers_scenario(self, config):
        """from([10, 20]) → add(10) дубликат, затем delete(10)."""
        g = Group.from_iterable([10, 20], config)

        assert g.has(10)
        assert not g.has(30)

        g.add(10)
        g.delete(10)

        assert not g.has(10)
        assert g.has(20)

    def test_value_equality_not_identity(self, config):
        """1, 1.0 и True равны по == и считаются одним участником."""
        g = Group.from_iterable([1, 1.0, True], config)

        assert g.size == 1
        assert list(g) == [1]
        assert g.has(True)

    def test_contains_delegates_to_has(self, config):
        g = Group.from_iterable(["a"], config)

        assert "a" in g
        assert "b" not in g


class TestGroupFromIterable:
    """Тесты фабрики from_iterable."""

    @pytest.mark.parametrize(
        "items, expected",
        [
            ([], []),
            (["a", "b", "c"], ["a", "b", "c"]),
            (["a", "b", "a", "c", "b"], ["a", "b", "c"]),
            ([3, 3, 3], [3]),
            ([2, 1, 2, 3, 1], [2, 1, 3]),
        ],
    )
    def test_first_occurrence_order(self, config, items, expected):
        g = Group.from_iterable(items, config)

        assert list(g) == expected
        assert g.size == len(expected)

    def test_accepts_generator(self, config):
        g = Group.from_iterable((n % 3 for n in range(10)), config)

        assert list(g) == [0, 1, 2]

    def test_keeps_config(self):
        cfg = GroupConfig(iteration_mode=IterationMode.SNAPSHOT)
        g = Group.from_iterable([1], cfg)

        assert g.config is cfg

    def test_default_config(self):
        g = Group.from_iterable([1])

        assert g.config.iteration_mode == IterationMode.LIVE
        assert g.config.membership_index == MembershipIndex.SCAN

    def test_logs_dropped_duplicates(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.core.collections.group"):
            Group.from_iterable(["a", "a", "b", "a"])

        assert "dropped 2 duplicate(s) of 4 item(s)" in caplog.text

    def test_no_log_without_duplicates(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="src.core.collections.group"):
            Group.from_iterable(["a", "b"])

        assert "dropped" not in caplog.text


class TestHashedMembership:
    """Тесты HASHED membership index."""

    @pytest.fixture
    def hashed(self) -> GroupConfig:
        return GroupConfig(membership_index=MembershipIndex.HASHED)

    def test_unhashable_values(self, hashed):
        g = Group(hashed)
        g.add([1, 2])
        g.add({"k": "v"})
        g.add([1, 2])

        assert g.size == 2
        assert g.has([1, 2])
        assert g.has({"k": "v"})
        assert not g.has([2, 1])

    def test_delete_unhashable(self, hashed):
        g = Group.from_iterable([[1], "a", [2]], hashed)
        g.delete([1])

        assert not g.has([1])
        assert g.has([2])
        assert list(g) == ["a", [2]]

    def test_mixed_values_keep_insertion_order(self, hashed):
        g = Group.from_iterable(["a", [1], 2, {"x": 1}, "a", 2], hashed)

        assert list(g) == ["a", [1], 2, {"x": 1}]

    def test_delete_equal_but_distinct_object(self, hashed):
        """delete(1.0) удаляет участника 1 и чистит hash index."""
        g = Group.from_iterable([1, 2], hashed)
        g.delete(1.0)

        assert not g.has(1)
        assert list(g) == [2]

        g.add(1)
        assert list(g) == [2, 1]


class TestGroupProtocol:
    """Тесты ==, repr."""

    def test_equality_is_order_sensitive(self):
        assert Group.from_iterable([1, 2]) == Group.from_iterable([1, 2])
        assert Group.from_iterable([1, 2]) != Group.from_iterable([2, 1])

    def test_equality_with_other_types(self):
        assert Group.from_iterable([1, 2]) != [1, 2]

    def test_unhashable_group(self):
        with pytest.raises(TypeError):
            hash(Group())

    def test_repr(self):
        assert repr(Group.from_iterable(["a", 1])) == "Group(['a', 1])"
