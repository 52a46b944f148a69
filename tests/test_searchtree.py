import pytest

from bintree import log
from bintree.exception import (
        BinTreeError,
        DuplicateKeyError,
        EmptyTreeError,
        NullNodeError
    )
from bintree.tree import SearchTree
from bintree.tree.node import BSTreeNode


def test_new_tree_is_empty():
    tree = SearchTree()
    assert tree.is_empty()
    assert tree.root() is None
    assert tree.size() == 0
    assert tree.height() == 0
    assert tree.sorted() == []
    assert len(tree) == 0
    assert str(tree) == ""


def test_scenario_insert_search(sample_tree, check_tree):
    assert sample_tree.sorted() == [20, 30, 40, 50, 70]
    assert sample_tree.search(40).depth == 2
    assert sample_tree.minimum().key == 20
    assert sample_tree.maximum().key == 70
    assert check_tree(sample_tree) == 5


def test_search_miss_is_not_an_error(sample_tree):
    assert sample_tree.search(45) is None
    assert sample_tree.search_depth(45) == (None, None)
    assert 45 not in sample_tree
    assert 40 in sample_tree


def test_search_depth(sample_tree):
    node, depth = sample_tree.search_depth(20)
    assert node.key == 20
    assert depth == 2


def test_first_insert_becomes_root():
    tree = SearchTree()
    node = tree.insert(10)
    assert tree.root() is node
    assert node.parent is None


def test_insert_duplicate():
    tree = SearchTree()
    tree.insert(5)
    with pytest.raises(DuplicateKeyError) as e:
        tree.insert(5)
    assert e.value.key == 5
    assert str(e.value) == "Insert failed: element already present in tree"
    assert tree.size() == 1


def test_delete_single_node():
    tree = SearchTree()
    node = tree.insert(10)
    tree.delete(node)
    assert tree.is_empty()
    assert tree.size() == 0
    with pytest.raises(EmptyTreeError) as e:
        tree.minimum()
    assert str(e.value) == "Get minimum failed: tree is empty"


def test_min_max_on_empty_tree():
    tree = SearchTree()
    with pytest.raises(EmptyTreeError):
        tree.minimum()
    with pytest.raises(EmptyTreeError) as e:
        tree.maximum()
    assert str(e.value) == "Get maximum failed: tree is empty"


@pytest.mark.parametrize("method", ["predecessor", "successor", "delete"])
def test_null_node_arguments(sample_tree, method):
    with pytest.raises(NullNodeError):
        getattr(sample_tree, method)(None)


def test_null_node_is_a_bintree_error(sample_tree):
    with pytest.raises(BinTreeError) as e:
        sample_tree.successor(None)
    assert str(e.value) == "Get successor failed: node is null"


def test_delete_root_with_one_child(make_tree, check_tree):
    tree = make_tree([10, 20, 15, 30])
    tree.delete(tree.root())
    assert tree.root().key == 20
    assert tree.sorted() == [15, 20, 30]
    assert check_tree(tree) == 3


def test_delete_root_with_two_children(sample_tree, check_tree):
    sample_tree.delete(sample_tree.root())
    assert sample_tree.root().key == 70
    assert sample_tree.sorted() == [20, 30, 40, 70]
    assert check_tree(sample_tree) == 4


def test_delete_inner_node(sample_tree, check_tree):
    sample_tree.delete(sample_tree.search(30))
    assert sample_tree.search(30) is None
    assert sample_tree.sorted() == [20, 40, 50, 70]
    assert sample_tree.search(40).depth == 1
    assert check_tree(sample_tree) == 4


def test_delete_key(sample_tree):
    sample_tree.delete_key(70)
    assert sample_tree.sorted() == [20, 30, 40, 50]
    with pytest.raises(NullNodeError) as e:
        sample_tree.delete_key(70)
    assert str(e.value) == "Delete failed: element not present in tree"


def test_delete_until_empty(sample_tree):
    for k in (50, 20, 70, 30, 40):
        sample_tree.delete_key(k)
    assert sample_tree.is_empty()
    sample_tree.insert(1)
    assert sample_tree.sorted() == [1]


def test_delete_foreign_lone_node_warns(sample_tree, capsys, monkeypatch):
    monkeypatch.setattr(log, 'logger', log.Logger(colors='never'))
    stray = BSTreeNode(99)
    sample_tree.delete(stray)
    assert sample_tree.size() == 5
    assert "warning: cannot delete node 99" in capsys.readouterr().err


def test_predecessor_successor(sample_tree):
    node = sample_tree.search(40)
    assert sample_tree.predecessor(node).key == 30
    assert sample_tree.successor(node).key == 50
    assert sample_tree.predecessor(sample_tree.minimum()) is None
    assert sample_tree.successor(sample_tree.maximum()) is None


def test_iteration_and_len(sample_tree):
    assert list(sample_tree) == [20, 30, 40, 50, 70]
    assert len(sample_tree) == 5


def test_str_renders_four_levels(make_tree):
    tree = make_tree([1, 2, 3, 4, 5])
    assert str(tree) == tree.render(4)
    assert len(str(tree).splitlines()) == 4
    assert len(tree.render(2).splitlines()) == 2


def test_string_keys(make_tree):
    tree = make_tree(["m", "c", "x", "a"])
    assert tree.sorted() == ["a", "c", "m", "x"]
    assert tree.search("a").depth == 2


def test_sorted_inserts_build_a_deep_chain(make_tree):
    keys = list(range(3000, 0, -1))
    tree = make_tree(keys)
    assert tree.size() == 3000
    assert len(tree) == 3000
    assert tree.height() == 3000
    assert tree.sorted() == sorted(keys)
    assert list(tree)[:3] == [1, 2, 3]
    assert len(str(tree).splitlines()) == 4
    tree.delete_key(1500)
    assert tree.search(1500) is None
    assert tree.search(1).depth == 2998
