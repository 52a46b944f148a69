"""Procedures for general binary trees.

None of these rely on the search tree order, so they work on any tree built
from BSTreeNode objects, e.g. the result of reconstruct(). All of them walk
the tree with an explicit stack or queue: an unbalanced tree may be as deep
as it is large.
"""

from .node import BSTreeNode
from ..exception import (
        ContentMismatchError,
        DuplicateElementsError,
        SizeMismatchError
    )

SPACE_WIDTH = 1

def size(root):
    """Returns the number of nodes in the tree rooted at root.

    Time complexity: O(n)"""
    n = 0
    stack = [root] if root is not None else []
    while stack:
        x = stack.pop()
        n += 1
        if x.left is not None:
            stack.append(x.left)
        if x.right is not None:
            stack.append(x.right)
    return n

def height(root):
    """Returns the number of levels of the tree rooted at root.

    Time complexity: O(n)"""
    levels = 0
    level = [root] if root is not None else []
    while level:
        levels += 1
        level = [c for x in level for c in (x.left, x.right) if c is not None]
    return levels

def preorder(root):
    stack = [root] if root is not None else []
    while stack:
        x = stack.pop()
        yield x.key
        if x.right is not None:
            stack.append(x.right)
        if x.left is not None:
            stack.append(x.left)

def inorder(root):
    stack = []
    x = root
    while stack or x is not None:
        while x is not None:
            stack.append(x)
            x = x.left
        x = stack.pop()
        yield x.key
        x = x.right

def postorder(root):
    # second item: both subtrees already emitted
    stack = [(root, False)] if root is not None else []
    while stack:
        x, done = stack.pop()
        if done:
            yield x.key
            continue
        stack.append((x, True))
        if x.right is not None:
            stack.append((x.right, False))
        if x.left is not None:
            stack.append((x.left, False))

def _label_map(root, max_levels):
    """Returns the labels of the upper max_levels levels keyed by heap index
    (root is 1, children of i are 2i and 2i+1) and the widest label of the
    whole tree."""
    labels = {}
    max_width = 0
    stack = [(root, 1, 0)] if root is not None else []
    while stack:
        x, index, line = stack.pop()
        label = str(x.key)
        max_width = max(max_width, len(label))
        if line < max_levels:
            labels[index] = label
        for child, child_index in ((x.left, index * 2), (x.right, index * 2 + 1)):
            if child is not None:
                stack.append((child, child_index, line + 1))
    return (labels, max_width)

def render(root, max_levels):
    """Renders the upper max_levels levels of a tree as centered text.

    The width of the output doubles with every level, so this is only
    useful for small trees and a monospace font.
    """
    labels, max_width = _label_map(root, max_levels)
    lines = []
    for line in range(min(max_levels, height(root))):
        padding_size = (2 ** (max_levels - line - 1) - 1) * (max_width + SPACE_WIDTH)
        padding = ' ' * (padding_size // 2)
        element_count = 2 ** line
        cells = []
        for i in range(element_count, 2 * element_count):
            cell = [padding]
            if line < max_levels - 1 and (SPACE_WIDTH + max_width) % 2 == 1:
                cell.append(' ')
            cell.append(labels.get(i, '').ljust(max_width))
            cell.append(padding)
            cells.append(''.join(cell))
        lines.append((' ' * SPACE_WIDTH).join(cells) + '\n')
    return ''.join(lines)

def _check_lists(preorder_keys, inorder_keys):
    if len(preorder_keys) != len(inorder_keys):
        raise SizeMismatchError
    for k in preorder_keys:
        if k not in inorder_keys:
            raise ContentMismatchError(k)
    if (len(set(preorder_keys)) != len(preorder_keys) or
            len(set(inorder_keys)) != len(inorder_keys)):
        raise DuplicateElementsError

def _build(root, pending, inorder_keys):
    # each entry: node to fill and the bounds of its inorder slice
    stack = [(root, 0, len(inorder_keys))]
    while stack:
        node, lo, hi = stack.pop()
        node.key = pending.pop()
        try:
            loc = inorder_keys.index(node.key, lo, hi)
        except ValueError:
            # key lies outside this slice: the branch ends here
            continue
        # the right subtree is pushed first so the left one consumes
        # preorder keys before it
        if loc < hi - 1:
            node.right = BSTreeNode(None, parent=node)
            stack.append((node.right, loc + 1, hi))
        if loc > lo:
            node.left = BSTreeNode(None, parent=node)
            stack.append((node.left, lo, loc))

def reconstruct(preorder_keys, inorder_keys):
    """Builds the unique binary tree with the given preorder and inorder
    listings.

    Both lists must hold the same distinct keys. Returns the root node, or
    None for empty lists. The arguments are not modified.
    """
    preorder_keys = list(preorder_keys)
    inorder_keys = list(inorder_keys)
    _check_lists(preorder_keys, inorder_keys)
    if not preorder_keys:
        return None
    # consumed from the end
    pending = preorder_keys[::-1]
    root = BSTreeNode(None)
    _build(root, pending, inorder_keys)
    return root
