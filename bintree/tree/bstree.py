import enum

from .node import BSTreeNode
from .. import log


class DeleteOutcome(enum.Enum):
    SPLICED = 'spliced'
    DETACHED = 'detached'
    CANNOT_DETACH = 'cannot detach'


def find(root, k):
    """Finds the node with key k and its depth below root.

    Returns (node, depth), or (None, None) if k is not found.
    Time complexity: O(h)"""
    x = root
    depth = 0
    while x is not None and k != x.key:
        if k < x.key:
            x = x.left
        else:
            x = x.right
        depth += 1
    if x is None:
        return (None, None)
    return (x, depth)

def search(root, k):
    """Finds the node with key k. Returns None if k is not found.

    The depth of a found node is stored in its depth attribute.
    Time complexity: O(h)"""
    x, depth = find(root, k)
    if x is not None:
        x.depth = depth
    return x

def minimum(x):
    """Finds the node with the minimal key in the subtree rooted at x

    Time complexity: O(h)"""
    while x.left is not None:
        x = x.left
    return x

def maximum(x):
    """Finds the node with the maximum key in the subtree rooted at x

    Time complexity: O(h)"""
    while x.right is not None:
        x = x.right
    return x

def successor(x):
    """Finds the successor of node x in sorted order

    Time complexity: O(h)"""
    if x.right is not None:
        return minimum(x.right)
    y = x.parent
    while y is not None and x is y.right:
        x = y
        y = y.parent
    return y

def predecessor(x):
    """Finds the predecessor of node x in sorted order

    Time complexity: O(h)"""
    if x.left is not None:
        return maximum(x.left)
    y = x.parent
    while y is not None and x is y.left:
        x = y
        y = y.parent
    return y

def insert(root, k, node_type=BSTreeNode):
    """Insert a new leaf with distinct key k below root.

    Returns the new node, or None if k is already in the tree. The tree is
    left untouched in that case.
    Time complexity: O(h)"""
    y = None
    x = root
    while x is not None:
        y = x
        if k < x.key:
            x = x.left
        elif k > x.key:
            x = x.right
        else:
            # key is already in tree
            return None

    new = node_type(k, parent=y)
    if k < y.key:
        y.left = new
    else:
        y.right = new
    return new

def transplant(old, new):
    """Replace subtree rooted at node old with the subtree rooted at node new

    Only the parent of old is relinked; a parentless old leaves new as a
    detached subtree root.
    Time complexity: O(1)"""
    parent = old.parent
    if parent is not None:
        if old is parent.left:
            parent.left = new
        else:
            parent.right = new
    if new is not None:
        new.parent = parent

def delete(node):
    """Remove node from its tree, preserving the search tree order.

    Returns (outcome, replacement) where replacement is the node that now
    occupies the position of the removed node (None if the position became
    empty). A node with neither children nor parent cannot be removed here;
    the owner of such a root has to drop its reference itself.
    Time complexity: O(h)"""
    if node.left is None:
        if node.right is not None:
            replacement = node.right
            transplant(node, replacement)
            outcome = DeleteOutcome.SPLICED
        elif node.parent is not None:
            replacement = None
            transplant(node, None)
            outcome = DeleteOutcome.DETACHED
        else:
            return (DeleteOutcome.CANNOT_DETACH, None)
    elif node.right is None:
        replacement = node.left
        transplant(node, replacement)
        outcome = DeleteOutcome.SPLICED
    else:
        # the successor is the minimum of the right subtree: no left child
        replacement = successor(node)
        if replacement.parent is not node:
            transplant(replacement, replacement.right)
            replacement.right = node.right
            replacement.right.parent = replacement
        transplant(node, replacement)
        replacement.left = node.left
        replacement.left.parent = replacement
        outcome = DeleteOutcome.SPLICED

    log.debug3("deleted node ", node.key, ": ", outcome.value)
    node.unlink()
    return (outcome, replacement)
