import pytest

from gapalgo.interval import Interval, IntervalType

ALL_TYPES = [
    IntervalType.LEFT_CLOSE_RIGHT_CLOSE,
    IntervalType.LEFT_CLOSE_RIGHT_OPEN,
    IntervalType.LEFT_OPEN_RIGHT_CLOSE,
    IntervalType.LEFT_OPEN_RIGHT_OPEN,
]


@pytest.mark.parametrize(
    "kind, at_one, at_five",
    [
        (IntervalType.LEFT_CLOSE_RIGHT_CLOSE, True, True),
        (IntervalType.LEFT_CLOSE_RIGHT_OPEN, True, False),
        (IntervalType.LEFT_OPEN_RIGHT_CLOSE, False, True),
        (IntervalType.LEFT_OPEN_RIGHT_OPEN, False, False),
    ],
)
def test_contains_value(kind, at_one, at_five):
    t = Interval(1, 5, kind)
    assert t.contains(1) is at_one
    assert t.contains(5) is at_five
    assert t.contains(3) is True
    assert t.contains(0) is False
    assert t.contains(6) is False


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_contains_interval(kind):
    t = Interval(1, 5, kind)
    t1 = Interval(1, 4, kind)
    assert t.contains_interval(t1) is True
    assert t1.contains_interval(t) is False


@pytest.mark.parametrize("kind", ALL_TYPES)
def test_overlap_of_contained(kind):
    t = Interval(1, 5, kind)
    t2 = Interval(1, 7, kind)
    result = t.overlap(t2)
    assert result.low == 1
    assert result.high == 5


def test_overlap_partial():
    result = Interval(1, 5).overlap(Interval(3, 8))
    assert (result.low, result.high) == (3, 5)


def test_overlap_disjoint_is_zero():
    result = Interval(1, 5).overlap(Interval(6, 9))
    assert (result.low, result.high) == (0, 0)


def test_overlap_touching_open_is_zero():
    kind = IntervalType.LEFT_CLOSE_RIGHT_OPEN
    result = Interval(1, 5, kind).overlap(Interval(5, 9, kind))
    assert (result.low, result.high) == (0, 0)


def test_overlap_touching_closed_meets():
    result = Interval(1, 5).overlap(Interval(5, 9))
    assert (result.low, result.high) == (5, 5)


def test_length():
    assert Interval(3, 10).length() == 7


def test_str_formats():
    assert str(Interval(1, 5)) == "[ 1 , 5 ]"
    assert str(Interval(1, 5, IntervalType.LEFT_OPEN_RIGHT_OPEN)) == "( 1 , 5 )"
    assert str(Interval(1, 5, IntervalType.LEFT_CLOSE_RIGHT_OPEN)) == "[ 1 , 5 )"
    assert str(Interval(1, 5, IntervalType.LEFT_OPEN_RIGHT_CLOSE)) == "( 1 , 5 ]"


def test_str_float_bounds():
    assert str(Interval(0.5, 1.0)) == "[ 0.500000 , 1.000000 ]"


def test_ordering_and_equality():
    a = Interval(1, 5)
    b = Interval(2, 3)
    assert a < b
    assert not b < a
    assert a == Interval(1, 5)
    assert a != Interval(1, 6)
    assert sorted([b, a]) == [a, b]
    assert {a: 1}[Interval(1, 5)] == 1


def test_unknown_type_rejected():
    with pytest.raises(ValueError):
        Interval(1, 5, IntervalType.UNKNOWN).contains(3)