import pytest
from hypothesis import given
from hypothesis import strategies as st

from k2dyn.definitions import Pair2D
from k2dyn.vector import Vector


def test_append_keeps_order():
    v = Vector()
    pairs = [Pair2D(0, 0), Pair2D(3, 3), Pair2D(15, 3)]
    for p in pairs:
        v.append(p)
    assert list(v) == pairs
    assert len(v) == 3


def test_insert_at_middle_shifts_right():
    v = Vector([Pair2D(1, 1), Pair2D(3, 3)])
    v.insert_at(Pair2D(2, 2), 1)
    assert v == [Pair2D(1, 1), Pair2D(2, 2), Pair2D(3, 3)]


def test_insert_at_end_appends():
    v = Vector([Pair2D(1, 1)])
    v.insert_at(Pair2D(5, 5), 1)
    assert v == [Pair2D(1, 1), Pair2D(5, 5)]


def test_insert_past_end_pads_with_zero_pair():
    v = Vector([Pair2D(1, 1)])
    v.insert_at(Pair2D(9, 9), 3)
    assert v == [Pair2D(1, 1), Pair2D(0, 0), Pair2D(0, 0), Pair2D(9, 9)]


def test_insert_past_end_uses_custom_fill():
    v = Vector(fill=-1)
    v.insert_at(7, 2)
    assert v == [-1, -1, 7]


def test_insert_negative_position_raises():
    v = Vector()
    with pytest.raises(IndexError):
        v.insert_at(Pair2D(1, 1), -1)


def test_setitem_and_getitem():
    v = Vector([Pair2D(1, 1), Pair2D(2, 2)])
    v[1] = Pair2D(30, 31)
    assert v[1] == Pair2D(30, 31)
    assert len(v) == 2


def test_getitem_out_of_range_raises():
    v = Vector([Pair2D(1, 1)])
    assert v[0] == Pair2D(1, 1)
    with pytest.raises(IndexError):
        _ = v[1]
    assert len(v) == 1


def test_setitem_out_of_range_raises():
    v = Vector()
    with pytest.raises(IndexError):
        v[0] = Pair2D(1, 1)


def test_equality_between_vectors():
    assert Vector([1, 2, 3]) == Vector([1, 2, 3])
    assert not (Vector([1, 2]) == Vector([2, 1]))


@given(st.lists(st.integers()), st.integers(min_value=0, max_value=40), st.integers())
def test_insert_at_property(items, position, element):
    v = Vector(items, fill=0)
    v.insert_at(element, position)
    assert v[position] == element
    assert len(v) == max(len(items) + 1, position + 1)
    assert list(v)[: min(position, len(items))] == items[:position]