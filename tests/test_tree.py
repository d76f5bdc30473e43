import random

from integrity_rules.tree import AATree


def test_empty_tree():
    tree = AATree()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.search("/etc") is None


def test_search_returns_inserted_data():
    tree = AATree()
    tree.insert("/etc", "etc-node")
    tree.insert("/usr", "usr-node")
    assert tree.search("/etc") == "etc-node"
    assert tree.search("/usr") == "usr-node"
    assert tree.search("/var") is None


def test_duplicate_key_keeps_first_data():
    tree = AATree()
    assert tree.insert("/a", 1) is True
    assert tree.insert("/a", 2) is False
    assert tree.search("/a") == 1
    assert len(tree) == 1


def test_iteration_is_sorted():
    keys = [f"/k{n:04d}" for n in range(500)]
    shuffled = keys[:]
    random.Random(7).shuffle(shuffled)
    tree = AATree()
    for key in shuffled:
        tree.insert(key, key.upper())
    assert list(tree) == keys
    assert list(tree.values()) == [k.upper() for k in keys]
    assert list(tree.items()) == [(k, k.upper()) for k in keys]
    assert len(tree) == len(keys)


def test_ascending_insertion_all_searchable():
    tree = AATree()
    for n in range(1000):
        tree.insert(n, n * 2)
    assert all(tree.search(n) == n * 2 for n in range(1000))
    assert list(tree) == list(range(1000))