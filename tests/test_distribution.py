import pytest

from gapalgo.distribution import IntervalDistribution, IntervalPercent
from gapalgo.interval import Interval


def _sample():
    d = IntervalDistribution()
    d.init_bins(10, 0, 30)
    for value in (0, 1, 2, 3, 13, 15, 23, 33):
        d.count(value)
    return d


def test_calc_percent():
    dd = _sample().percents()
    assert dd.get_percent(5) == pytest.approx(4 / 7)
    assert dd.get_percent(15) == pytest.approx(2 / 7)
    assert dd.get_percent(25) == pytest.approx(1 / 7)
    assert dd.get_percent(35) == pytest.approx(0 / 7)


def test_sub_percent():
    dd = _sample().percents()
    d1 = IntervalDistribution()
    d1.init_bins(10, 0, 30)
    d1.count(1)
    d1.count(11)
    dk = d1.percents().valid_keys()
    assert dk == [Interval(0, 9), Interval(10, 19)]
    dt = dd.sub_percent(dk)
    assert dt.get_percent(11) == pytest.approx(1 / 3)
    assert dt.get_percent(1) == pytest.approx(2 / 3)


def test_init_bins_layout():
    d = IntervalDistribution()
    d.init_bins(10, 0, 30)
    assert list(d.freqs) == [Interval(0, 9), Interval(10, 19), Interval(20, 29)]
    assert all(count == 0 for count in d.freqs.values())


def test_distribution_str():
    assert str(_sample()) == "[ 0 , 9 ]\t4\n[ 10 , 19 ]\t2\n[ 20 , 29 ]\t1\n"


def test_percent_str_uses_six_decimals():
    p = IntervalPercent({Interval(0, 9): 0.5})
    assert str(p) == "[ 0 , 9 ]\t0.500000\n"


def test_count_weight_and_valid_part():
    d = IntervalDistribution()
    d.init_bins(10, 0, 30)
    d.count(12, 3)
    valid = d.valid_part()
    assert valid.freqs == {Interval(10, 19): 3}


def test_percents_sum_to_one():
    total = sum(_sample().percents().percents.values())
    assert total == pytest.approx(1.0)


def test_sub_percent_all_zero():
    p = IntervalPercent({Interval(0, 9): 0.0})
    sub = p.sub_percent([Interval(0, 9), Interval(10, 19)])
    assert sub.percents == {Interval(0, 9): 0.0, Interval(10, 19): 0.0}


def test_compare():
    mine = IntervalPercent({Interval(0, 9): 0.5})
    other = IntervalPercent({Interval(0, 9): 0.25, Interval(10, 19): 0.75})
    missing, sd = mine.compare(other)
    assert missing == pytest.approx(0.75)
    assert sd == pytest.approx(0.03125)


def test_compare_identical():
    p = _sample().percents()
    missing, sd = p.compare(p)
    assert missing == 0.0
    assert sd == 0.0