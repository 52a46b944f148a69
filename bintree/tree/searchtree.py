from . import bstree
from . import general
from .node import BSTreeNode
from .. import log
from ..exception import DuplicateKeyError, EmptyTreeError, NullNodeError

DEFAULT_LEVELS = 4

class SearchTree(object):
    """An unbalanced binary search tree with distinct keys.

    The tree is the only owner of the root node; all structural work is
    delegated to the procedures in bstree and general.
    """

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self._root = None

    def root(self):
        return self._root

    def is_empty(self):
        return self._root is None

    def search(self, k):
        """Finds the node with key k. Returns None if k is not found.

        The depth of the found node is available as node.depth until the
        tree is modified."""
        return bstree.search(self._root, k)

    def search_depth(self, k):
        return bstree.find(self._root, k)

    def contains(self, k):
        return self.search_depth(k)[0] is not None

    def minimum(self):
        if self._root is None:
            raise EmptyTreeError("Get minimum")
        return bstree.minimum(self._root)

    def maximum(self):
        if self._root is None:
            raise EmptyTreeError("Get maximum")
        return bstree.maximum(self._root)

    def predecessor(self, node):
        if node is None:
            raise NullNodeError("Get predecessor")
        return bstree.predecessor(node)

    def successor(self, node):
        if node is None:
            raise NullNodeError("Get successor")
        return bstree.successor(node)

    def insert(self, k):
        """Insert a new node with distinct key k.

        Raises DuplicateKeyError if k is already in the tree.
        Returns the new node"""
        if self._root is None:
            self._root = self.node_type(k)
            log.debug2("inserted ", k, " as root")
            return self._root
        new = bstree.insert(self._root, k, self.node_type)
        if new is None:
            raise DuplicateKeyError(k)
        log.debug2("inserted ", k)
        return new

    def delete(self, node):
        """Remove node from the tree.

        The node is not checked for membership; passing a node of another
        tree corrupts that tree."""
        if node is None:
            raise NullNodeError("Delete", "element not present in tree")
        was_root = node is self._root
        outcome, replacement = bstree.delete(node)
        if outcome is bstree.DeleteOutcome.CANNOT_DETACH:
            if was_root:
                self._root = None
            else:
                log.warn("cannot delete node ", node.key,
                         ": not part of this tree")
        elif was_root:
            self._root = replacement

    def delete_key(self, k):
        self.delete(self.search(k))

    def size(self):
        return general.size(self._root)

    def height(self):
        return general.height(self._root)

    def sorted(self):
        """Returns all keys in ascending order."""
        return list(general.inorder(self._root))

    def render(self, max_levels=DEFAULT_LEVELS):
        return general.render(self._root, max_levels)

    def __len__(self):
        return self.size()

    def __iter__(self):
        return general.inorder(self._root)

    def __contains__(self, k):
        return self.contains(k)

    def __str__(self):
        return self.render()
