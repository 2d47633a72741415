import pytest

from scaffkit.freq import (
    Freq,
    incr,
    middle_valid,
    update_as_biggest,
    update_as_smallest,
)


def test_touch_new_key_takes_given_count():
    f = Freq()
    f.touch("x", 7)
    assert f.get_freq("x") == 7


def test_touch_accumulates():
    f = Freq()
    f.touch("x", 3)
    f.touch("x", 4)
    assert f.get_freq("x") == 3 + 4


def test_touch_default_is_one_per_call():
    once = Freq()
    once.touch("y", 2)
    twice = Freq()
    twice.touch("y")
    twice.touch("y")
    assert twice.get_freq("y") == once.get_freq("y")


def test_missing_key_is_zero():
    assert Freq().get_freq("absent") == 0


def test_str_is_sorted_tab_separated():
    f = Freq()
    f.touch("b", 2)
    f.touch("a", 1)
    assert str(f) == "a\t1\nb\t2\n"


def test_incr_inserts_then_adds():
    m = {}
    incr(m, "k", 5)
    assert m == {"k": 5}
    incr(m, "k", 5)
    assert m["k"] == 5 + 5


def test_update_as_biggest():
    m = {"k": 3}
    update_as_biggest(m, "k", 9)
    assert m["k"] == 9
    update_as_biggest(m, "k", 1)
    assert m["k"] == 9
    update_as_biggest(m, "new", 4)
    assert m["new"] == 4


def test_update_as_smallest():
    m = {"k": 3}
    update_as_smallest(m, "k", 9)
    assert m["k"] == 3
    update_as_smallest(m, "k", 1)
    assert m["k"] == 1


def test_middle_valid_zero_factor_takes_largest():
    assert middle_valid({"a": 10, "b": 5, "c": 1}, 0.0) == (10, 10)


def test_middle_valid_full_factor_takes_all():
    assert middle_valid({"a": 10, "b": 5, "c": 1}, 1.0) == (1, 10)


def test_middle_valid_half():
    assert middle_valid({"a": 10, "b": 5, "c": 1}, 0.5) == (10, 10)


def test_middle_valid_smallest_not_above_biggest():
    table = {i: (i * 7) % 11 + 1 for i in range(20)}
    smallest, biggest = middle_valid(table, 0.8)
    assert smallest <= biggest
    assert biggest == max(table.values())


@pytest.mark.parametrize("fac", [-0.1, 1.5])
def test_middle_valid_bad_factor(fac):
    with pytest.raises(ValueError):
        middle_valid({"a": 1}, fac)


def test_middle_valid_empty():
    with pytest.raises(ValueError):
        middle_valid({}, 0.5)