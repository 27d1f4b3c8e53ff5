import io

import pytest

from sattools.disjoint_sets import DisjointSets


def make(elements):
    sets = DisjointSets()
    for element in elements:
        sets.add(element)
    return sets


def test_add_counts_elements_and_sets():
    sets = make([0, 3, 5, 3])
    assert sets.num_elements() == 3
    assert sets.num_sets() == 3
    assert sets.find(3) == 3


def test_find_missing_returns_minus_one():
    sets = make([1])
    assert sets.find(0) == -1
    assert sets.find(42) == -1


def test_union_equal_rank_keeps_first_root():
    sets = make([1, 2])
    sets.union(1, 2)
    assert sets.find(2) == 1
    assert sets.find(1) == 1
    assert sets.num_sets() == 1


def test_union_is_transitive():
    sets = make(range(6))
    sets.union(0, 1)
    sets.union(2, 3)
    sets.union(1, 3)
    assert sets.find(0) == sets.find(2) == sets.find(3) == sets.find(1)
    assert sets.find(4) != sets.find(0)
    assert sets.num_sets() == 3


def test_union_of_same_set_does_not_change_count():
    sets = make([0, 1])
    sets.union(0, 1)
    sets.union(1, 0)
    assert sets.num_sets() == 1


def test_union_missing_raises():
    sets = make([0])
    with pytest.raises(KeyError):
        sets.union(0, 7)


def test_add_negative_raises():
    with pytest.raises(ValueError):
        DisjointSets().add(-1)


def test_clear():
    sets = make([0, 1, 2])
    sets.union(0, 2)
    sets.clear()
    assert sets.num_elements() == 0
    assert sets.num_sets() == 0
    assert sets.find(0) == -1


def test_debug_print():
    sets = make([2, 4])
    sets.union(2, 4)
    out = io.StringIO()
    sets.debug_print(out)
    assert out.getvalue() == "2 : 2\n4 : 2\n"