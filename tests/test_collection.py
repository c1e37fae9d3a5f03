import pytest

from gapalgo.collection import Collection


def init_c1():
    return Collection("Hello")


def init_c2():
    return Collection("World")


def test_collect_size():
    test = Collection()
    test += init_c1()
    test += init_c2()
    assert len(test) == 10
    assert test.key_size() == 7


def test_union():
    t3 = Collection.union(init_c1(), init_c2())
    assert len(t3) == 8
    assert t3.key_size() == 7


def test_intersection():
    t3 = Collection.intersection(init_c1(), init_c2())
    assert len(t3) == 2
    assert t3.key_size() == 2
    assert dict(t3) == {"l": 1, "o": 1}


def test_jaccard():
    assert Collection.jaccard(init_c1(), init_c2()) == pytest.approx(0.25)


def test_iterator():
    expected = {"H": 1, "e": 1, "l": 2, "o": 1}
    pairs = list(init_c1())
    assert dict(pairs) == expected
    assert [element for element, _ in pairs] == sorted(expected)


def test_add_with_count():
    c = Collection()
    c.add("x", 3)
    assert dict(c) == {"x": 3}


def test_remove_drops_empty_key():
    c = Collection("aab")
    c.remove("a", 2)
    assert dict(c) == {"b": 1}
    assert c.key_size() == 1


def test_remove_missing_raises():
    with pytest.raises(KeyError):
        Collection("a").remove("z")


def test_remove_too_many_raises():
    with pytest.raises(ValueError):
        Collection("a").remove("a", 2)


def test_non_positive_count_raises():
    with pytest.raises(ValueError):
        Collection().add("a", 0)


def test_subtract_self_empties():
    c = Collection("hello")
    c -= c
    assert len(c) == 0


def test_jaccard_of_empty_raises():
    with pytest.raises(ValueError):
        Collection.jaccard(Collection(), Collection())