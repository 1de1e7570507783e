import logging

import pytest
from pyset import *


GROUP_ONE = ["red", "blue", "green"]
GROUP_TWO = ["red", "yellow", "purple", "black", "blue"]
COMMON = ["red", "blue"]
EXCLUSIVE = ["green", "yellow", "purple", "black"]


def test_union(mode):
    one = new(*GROUP_ONE, mode=mode)
    two = new("red", "yellow", "purple", "black", mode=mode)

    assert union(one, one).size() == one.size()

    u = union(one, two)
    assert one.size() == 3
    assert two.size() == 4
    assert u.size() == one.size() + two.size() - 1
    for item in GROUP_ONE + ["yellow", "purple", "black"]:
        assert u.contains(item)


def test_union_size():
    assert union(new(*GROUP_ONE), new(*GROUP_TWO)).size() == 6


def test_intersection(mode):
    one = new(*GROUP_ONE, mode=mode)
    two = new(*GROUP_TWO, mode=mode)

    assert intersection(one, one).size() == one.size()

    i = intersection(one, two)
    assert one.size() == len(GROUP_ONE)
    assert two.size() == len(GROUP_TWO)
    assert sorted(i) == sorted(COMMON)
    for item in EXCLUSIVE:
        assert not i.contains(item)


def test_difference_is_symmetric(mode):
    one = new(*GROUP_ONE, mode=mode)
    two = new(*GROUP_TWO, mode=mode)

    assert difference(one, one).is_empty()

    d = difference(one, two)
    assert one.size() == len(GROUP_ONE)
    assert two.size() == len(GROUP_TWO)
    assert sorted(d) == sorted(EXCLUSIVE)
    for item in COMMON:
        assert not d.contains(item)
    assert sorted(difference(two, one)) == sorted(EXCLUSIVE)


def test_subtract(mode):
    one = new(*GROUP_ONE, mode=mode)
    two = new(*GROUP_TWO, mode=mode)

    assert sorted(subtract(one, two)) == ["green"]
    assert sorted(subtract(two, one)) == ["black", "purple", "yellow"]
    assert subtract(one, one).is_empty()
    assert sorted(subtract(one, new(mode=mode))) == sorted(GROUP_ONE)


def test_operands_unchanged(mode):
    one = new(*GROUP_ONE, mode=mode)
    two = new(*GROUP_TWO, mode=mode)
    for op in (union, intersection, difference, subtract):
        result = op(one, two)
        assert result is not one and result is not two
        assert sorted(one) == sorted(GROUP_ONE)
        assert sorted(two) == sorted(GROUP_TWO)


def test_result_class_follows_first_operand(mode):
    one = new(*GROUP_ONE, mode=mode)
    for op in (union, intersection, difference, subtract):
        assert type(op(one, one)) is mode.set_class


def test_empty_operands(mode):
    empty = new(mode=mode)
    one = new(*GROUP_ONE, mode=mode)
    assert sorted(union(empty, one)) == sorted(GROUP_ONE)
    assert intersection(empty, one).is_empty()
    assert sorted(difference(empty, one)) == sorted(GROUP_ONE)
    assert union(empty, empty).is_empty()


def test_non_set_operand():
    with pytest.raises(TypeError):
        union(new(1), {1, 2})
    with pytest.raises(TypeError):
        intersection([1], new(1))
    with pytest.raises(TypeError):
        new(1).subset({1})


def test_mixed_modes_warns(caplog):
    plain = new(1, 2)
    shared = new(2, 3, mode=ConcurrencyMode.CONCURRENT)
    with caplog.at_level(logging.WARNING):
        u = union(shared, plain)
    assert isinstance(u, ConcurrentSet)
    assert sorted(u) == [1, 2, 3]
    assert "unsynchronized Set" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        intersection(plain, plain)
    assert caplog.text == ""


def test_subset(mode):
    s = new("one", "two", "three", 4, 5, 6, mode=mode)
    superset = new("one", "two", "three", "four", "five", "six", 1, 2, 3, 4, 5, 6, mode=mode)
    alt = new(1, 2, 3, 4, 5, 6, mode=mode)

    assert s.subset(superset)
    assert not s.subset(alt)
    assert new("one", "two", 4, mode=mode).subset(new("one", "two", "three", 1, 2, 3, 4, mode=mode))


def test_empty_subset(mode):
    empty = new(mode=mode)
    assert empty.subset(empty)
    assert empty.subset(new(1, mode=mode))
    assert not new(1, mode=mode).subset(empty)
    s = new(1, 2, mode=mode)
    assert s.subset(s)


def test_operators(mode):
    one = new(*GROUP_ONE, mode=mode)
    two = new(*GROUP_TWO, mode=mode)

    assert sorted(one | two) == sorted(union(one, two))
    assert sorted(one & two) == sorted(COMMON)
    assert sorted(one ^ two) == sorted(EXCLUSIVE)
    assert sorted(one - two) == ["green"]
    assert (one & two) <= one
    assert not one <= two


def test_operators_reject_builtin_sets(mode):
    one = new(*GROUP_ONE, mode=mode)
    with pytest.raises(TypeError):
        one | {"red"}
    with pytest.raises(TypeError):
        one - ["red"]
    with pytest.raises(TypeError):
        one <= {"red"}
