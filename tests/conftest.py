import pytest

from bintree.tree import SearchTree


def _check_node(node, low, high):
    if node is None:
        return 0
    assert low is None or node.key > low
    assert high is None or node.key < high
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
    return (1 + _check_node(node.left, low, node.key)
            + _check_node(node.right, node.key, high))


@pytest.fixture
def make_tree():
    def make(keys):
        tree = SearchTree()
        for k in keys:
            tree.insert(k)
        return tree
    return make


@pytest.fixture
def check_tree():
    """Assert search order and parent links; returns the node count."""
    def check(tree):
        root = tree.root()
        if root is not None:
            assert root.parent is None
        return _check_node(root, None, None)
    return check


@pytest.fixture
def sample_tree(make_tree):
    return make_tree([50, 30, 70, 20, 40])
