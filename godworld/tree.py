"""A minimal parent/child tree with pre-order traversal."""

from __future__ import annotations

from typing import Callable, Iterator, TypeVar

__all__ = ["TreeNode"]

_Node = TypeVar("_Node", bound="TreeNode")


class TreeNode:
    """A node that knows its parent and owns an ordered list of children."""

    def __init__(self, parent: TreeNode | None = None) -> None:
        self.parent = parent
        self._children: list[TreeNode] = []

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return tuple(self._children)

    def _ancestors(self) -> Iterator[TreeNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def add_child(self, child: _Node) -> _Node:
        """Attach ``child`` below this node and return it."""
        if child is self or any(node is child for node in self._ancestors()):
            raise ValueError("adding this child would create a cycle")
        if child.parent is None:
            child.parent = self
        elif child.parent is not self:
            raise ValueError("node already belongs to another parent")
        if any(existing is child for existing in self._children):
            raise ValueError("node is already a child of this node")
        self._children.append(child)
        return child

    def visit(self, callback: Callable[[TreeNode], object]) -> None:
        """Call ``callback`` on this node and then on every descendant, pre-order."""
        callback(self)
        for child in self._children:
            child.visit(callback)

    def __iter__(self) -> Iterator[TreeNode]:
        yield self
        for child in self._children:
            yield from child

    @property
    def depth(self) -> int:
        """1 for a root node, one more for every ancestor above it."""
        return 1 + sum(1 for _ in self._ancestors())