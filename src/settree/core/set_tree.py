"""
Set tree: a mutable ownership tree with unique values along every branch.

Each node owns its children and keeps a weak back-reference to its parent.
Values are compared with ``==``; a value may appear any number of times in
the tree, but never twice on the same root-to-node path. This is what makes
the tree suitable for dependency expansion: a value that (indirectly)
refers to itself is rejected instead of expanding forever.

Traversal orders for the tree below:

              1
             / \\
            2   3
           /   / \\
          4   5   7

- preorder / iterate_out:  1, 2, 4, 3, 5, 7
- postorder / iterate_in:  4, 2, 5, 7, 3, 1
- pairs / iterate_pairs:   (2, 4), (1, 2), (3, 5), (3, 7), (1, 3)

Example:
    root = SetTree(1)
    two = root.add_child(2)
    two.add_child(4)
    root.add_child(3)
    two.add_child(1)  # DuplicateValueError: 1 is an ancestor of 2
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from settree.core.errors import DuplicateValueError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SetTree(Generic[T]):
    """
    A node of a set tree. The root node is the tree.

    Attributes:
        value: Caller payload, compared by equality.
    """

    def __init__(self, value: T):
        self.value = value
        self._parent: Optional[weakref.ReferenceType[SetTree[T]]] = None
        self._children: List[SetTree[T]] = []

    def __repr__(self) -> str:
        return f"SetTree(value={self.value!r}, children={len(self._children)})"

    def __str__(self) -> str:
        parts: List[str] = []
        stack: List[Any] = [self]
        while stack:
            item = stack.pop()
            if not isinstance(item, SetTree):
                parts.append(item)
                continue
            parts.append(f"{item.value} -> [")
            stack.append("]")
            for index in range(len(item._children) - 1, -1, -1):
                stack.append(item._children[index])
                if index:
                    stack.append(", ")
        return "".join(parts)

    # =========================================================================
    # Links
    # =========================================================================

    @property
    def parent(self) -> Optional[SetTree[T]]:
        """The owning node, or None for a root (or once the owner is gone)."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def children(self) -> Tuple[SetTree[T], ...]:
        """Direct children in insertion order (read-only view)."""
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def depth(self) -> int:
        """Number of parent links between this node and its root."""
        return sum(1 for _ in self.ancestors())

    # =========================================================================
    # Navigation
    # =========================================================================

    def ancestors(self) -> Iterator[SetTree[T]]:
        """Yield the ancestor chain, nearest first. The node itself is excluded."""
        cursor = self.parent
        while cursor is not None:
            yield cursor
            cursor = cursor.parent

    def find_root(self) -> SetTree[T]:
        """Return the node at the top of this node's ancestor chain."""
        cursor = self
        for cursor in self.ancestors():
            pass
        return cursor

    def path(self) -> List[SetTree[T]]:
        """Nodes from the root down to (and including) this node."""
        chain = [self, *self.ancestors()]
        chain.reverse()
        return chain

    def ancestor_contains(self, value: T) -> Optional[SetTree[T]]:
        """
        Find the nearest ancestor holding a value equal to ``value``.

        The node itself is not compared.

        Returns:
            The matching ancestor, or None if no ancestor matches.
        """
        for ancestor in self.ancestors():
            if ancestor.value == value:
                return ancestor
        return None

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_child(self, value: T) -> SetTree[T]:
        """
        Create a child holding ``value`` and append it to this node.

        The value is checked against the chain the child would hang from:
        this node and every ancestor above it. Siblings are not checked.

        Args:
            value: Payload of the new node.

        Returns:
            The new child, for further chaining.

        Raises:
            DuplicateValueError: If this node or one of its ancestors already
                holds an equal value. Nothing is modified in that case.
        """
        node = SetTree(value)

        conflict = self if self.value == value else self.ancestor_contains(value)
        if conflict is not None:
            raise DuplicateValueError(conflict, value, parent=self)

        node._parent = weakref.ref(self)
        self._children.append(node)
        logger.debug("Added %r under %r", value, self.value)
        return node

    def remove(self, node: SetTree[T]) -> None:
        """
        Detach a direct child, clearing both sides of the link.

        The child's own subtree stays attached to it. Do not call this while
        iterating this node's children; use remove_children() instead.
        Nodes that are not direct children are ignored.
        """
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                node._parent = None
                logger.debug("Removed %r from %r", node.value, self.value)
                return

    def remove_children(self, predicate: Callable[[SetTree[T]], bool]) -> List[SetTree[T]]:
        """Detach every direct child matching ``predicate`` and return them."""
        targets = [child for child in self._children if predicate(child)]
        for child in targets:
            self.remove(child)
        return targets

    # =========================================================================
    # Traversal
    # =========================================================================

    def preorder(self) -> Iterator[SetTree[T]]:
        """Yield this node, then each child's subtree in order."""
        stack: List[SetTree[T]] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def postorder(self) -> Iterator[SetTree[T]]:
        """Yield each child's subtree in order, then this node."""
        stack: List[Tuple[SetTree[T], bool]] = [(self, False)]
        while stack:
            node, done = stack.pop()
            if done:
                yield node
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node._children))

    def pairs(self) -> Iterator[Tuple[T, T]]:
        """
        Yield ``(parent.value, node.value)`` for every node below this one.

        A node's pair comes after the pairs of its whole subtree, so
        contributions flow bottom-up: by the time a node is paired with its
        parent, all of its own children have been paired with it.
        """
        for node in self.postorder():
            if node is self:
                continue
            parent = node.parent
            if parent is not None:
                yield parent.value, node.value

    def iterate_pairs(self, block: Callable[[T, T], Any]) -> None:
        """Call ``block(parent_value, child_value)`` in pairs() order."""
        for parent_value, child_value in self.pairs():
            block(parent_value, child_value)

    def iterate_out(self, block: Callable[[SetTree[T]], Any]) -> None:
        """Call ``block`` on every node, root first."""
        for node in self.preorder():
            block(node)

    def iterate_in(self, block: Callable[[SetTree[T]], Any]) -> None:
        """Call ``block`` on every node, leaves first."""
        for node in self.postorder():
            block(node)

    # =========================================================================
    # Rebuild
    # =========================================================================

    def invalidate(self, expand: Callable[[SetTree[T]], Iterable[T]]) -> None:
        """
        Drop every branch below this node and regrow it from ``expand``.

        Teardown disconnects all nodes of the current subtree from each other.
        Rebuild then walks from this node root-first: each visited node is
        expanded once, its children are created with add_child(), and those
        children are visited (and expanded) next. There is no second pass.

        Args:
            expand: Returns the values of the children for a node.

        Raises:
            DuplicateValueError: If an expansion repeats a value already on
                the branch. Nodes expanded before the failure stay rebuilt;
                the remaining ones are not expanded.
        """
        stale = list(self.preorder())
        for node in stale:
            if node is not self:
                node._parent = None
            node._children.clear()

        expanded = 0
        stack: List[SetTree[T]] = [self]
        while stack:
            node = stack.pop()
            for value in expand(node):
                node.add_child(value)
            expanded += 1
            stack.extend(reversed(node._children))

        logger.debug(
            "Invalidated %r: dropped %d node(s), expanded %d node(s)",
            self.value,
            len(stale) - 1,
            expanded,
        )


__all__ = ["SetTree"]
