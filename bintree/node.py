"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value.

    A node knows its parent and its two children. Creating a node with a
    parent only records that parent; it does not attach the node as one of
    the parent's children. Use :meth:`insert_left` or :meth:`insert_right`
    for that, or assign ``left``/``right`` directly.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child becomes its left child."""
        child = Node(value, self)
        if self.left is not None:
            child.left = self.left
            self.left.parent = child
        self.left = child
        return child

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child becomes its right child."""
        child = Node(value, self)
        if self.right is not None:
            child.right = self.right
            self.right.parent = child
        self.right = child
        return child

    def delete(self) -> None:
        """Remove this subtree from its parent and break all of its links."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(child for child in (node.left, node.right) if child is not None)
            node.parent = node.left = node.right = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield the values of the subtree in pre-order."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield the values of the subtree in in-order."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield the values of the subtree in post-order."""
        if self.left is not None:
            yield from self.left.postorder()
        if self.right is not None:
            yield from self.right.postorder()
        yield self.value

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf; a leaf has height 0."""
        return max(_levels(self.left), _levels(self.right))

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in _walk(self))

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node in _walk(self) if node.is_leaf())

    def nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node in _walk(self) if not node.is_leaf())

    def balance(self) -> int:
        """Height of the left subtree minus height of the right subtree."""
        return _levels(self.left) - _levels(self.right)

    def is_full(self) -> bool:
        """Return True if every node in the subtree has zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in _walk(self)
        )

    def is_perfect(self) -> bool:
        """Return True if every inner node has two children and all leaves share a level."""
        return self.size() == (1 << _levels(self)) - 1

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()


def _levels(node: Optional[Node]) -> int:
    """Number of levels in a subtree; an empty subtree has none."""
    if node is None:
        return 0
    return 1 + max(_levels(node.left), _levels(node.right))


def _walk(root: Node) -> Iterator[Node]:
    """Yield every node of the subtree rooted at ``root``."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)