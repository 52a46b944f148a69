import weakref


class BSTreeNode(object):
    """A node of a binary search tree.

    The node owns its left and right children. The parent link is only a
    weak back-reference and never keeps the parent alive."""

    __slots__ = ('key', 'left', 'right', 'depth', '_parent', '__weakref__')

    def __init__(self, key, parent=None, left=None, right=None):
        self.key = key
        self.parent = parent
        self.left = left
        self.right = right
        # depth recorded by the last successful search for this node
        self.depth = 0

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = weakref.ref(node) if node is not None else None

    def copy_data(self, other, copy_parent=False):
        """Take over key and children of node other.

        Adopted children get this node as their parent.
        Time complexity: O(1)"""
        self.key = other.key
        if copy_parent:
            self.parent = other.parent
        self.left = other.left
        self.right = other.right
        if self.left is not None:
            self.left.parent = self
        if self.right is not None:
            self.right.parent = self

    def unlink(self):
        self.parent = None
        self.left = None
        self.right = None

    def is_leaf(self):
        return self.left is None and self.right is None

    def is_root(self):
        return self.parent is None

    def __str__(self):
        return str(self.key)

    def __repr__(self):
        return '<BSTreeNode key={0!r}>'.format(self.key)
