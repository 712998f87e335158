import random

import pytest

from algokit.persistent import PersistentSegmentTree

A = [1, 2, 3, 4, 5]


@pytest.fixture
def worked_tree():
    tree = PersistentSegmentTree(A)
    v1 = tree.update(0, 4, 1)
    v2 = tree.update(v1, 2, 10)
    return tree, v1, v2


def test_worked_example(worked_tree):
    tree, v1, v2 = worked_tree
    assert tree.query(v1, 0, 4) == 11
    assert tree.query(v2, 3, 4) == 5
    assert tree.query(0, 0, 3) == 10


def test_version_numbers_increase(worked_tree):
    tree, v1, v2 = worked_tree
    assert (v1, v2) == (1, 2)
    assert tree.versions == 3


def test_versions_stay_independent():
    rng = random.Random(3)
    base = [rng.randint(-10, 10) for _ in range(17)]
    tree = PersistentSegmentTree(base)
    snapshots = [list(base)]
    for _ in range(30):
        parent = rng.randrange(len(snapshots))
        index = rng.randrange(len(base))
        value = rng.randint(-10, 10)
        version = tree.update(parent, index, value)
        snapshot = list(snapshots[parent])
        snapshot[index] = value
        snapshots.append(snapshot)
        assert version == len(snapshots) - 1
    for version, snapshot in enumerate(snapshots):
        for _ in range(10):
            left = rng.randrange(len(base))
            right = rng.randrange(left, len(base))
            assert tree.query(version, left, right) == sum(snapshot[left : right + 1])


def test_empty_and_outside_ranges():
    tree = PersistentSegmentTree(A)
    assert tree.query(0, 3, 2) == 0
    assert tree.query(0, 7, 9) == 0
    assert tree.query(0, -5, 100) == sum(A)


def test_length():
    assert len(PersistentSegmentTree(A)) == len(A)


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        PersistentSegmentTree([])


@pytest.mark.parametrize("index", [-1, 5])
def test_update_index_out_of_range(index):
    tree = PersistentSegmentTree(A)
    with pytest.raises(IndexError):
        tree.update(0, index, 1)


@pytest.mark.parametrize("version", [-1, 1])
def test_unknown_version(version):
    tree = PersistentSegmentTree(A)
    with pytest.raises(IndexError):
        tree.query(version, 0, 4)
    with pytest.raises(IndexError):
        tree.update(version, 0, 1)