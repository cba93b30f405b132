"""The OrderedTree: a mutable, unbalanced binary search tree.

Every node satisfies the BST property: keys in its left subtree are strictly
less than its key, keys in its right subtree strictly greater, and no key
appears twice. Insert, lookup and delete walk down from the root with an
explicit parent reference rather than recursing, and traversal keeps its own
stack, so a degenerate tree built from sorted input works at any size.

The tree is single-threaded. Callers that share one across threads must
serialise every call, including traversals, with their own lock.

Example:
    >>> tree = OrderedTree()
    >>> for key in [5, 3, 8]:
    ...     _ = tree.insert(key, str(key))
    >>> list(tree.in_order_traversal())
    [(3, '3'), (5, '5'), (8, '8')]
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .core.node import BSTNode
from .errors import (
    DeletionOutcome,
    InsertOutcome,
    InvariantViolationError,
    ConcurrentModificationError,
    KeyNotFoundError,
    LookupResult,
    NOT_FOUND,
)

logger = logging.getLogger(__name__)


class OrderedTree:
    """Binary search tree mapping unique, totally ordered keys to values."""

    def __init__(self):
        self.root: Optional[BSTNode] = None
        self._size = 0
        # Bumped on every structural change; traversals compare against it
        self._mutations = 0

    @classmethod
    def from_items(cls, items: Iterable[Tuple[Any, Any]]) -> "OrderedTree":
        """Build a tree by inserting ``(key, value)`` pairs in order.

        Later duplicates are rejected just as ``insert`` rejects them; the
        first value for a key wins. No balancing takes place.
        """
        tree = cls()
        for key, value in items:
            tree.insert(key, value)
        return tree

    # ---------- Insert ----------

    def insert(self, key: Any, value: Any) -> InsertOutcome:
        """Insert a new ``(key, value)`` pair.

        Returns:
            InsertOutcome.INSERTED when a node was added, or
            InsertOutcome.DUPLICATE_KEY when the key is already present,
            in which case the tree is left untouched.
        """
        if self.root is None:
            self.root = BSTNode(key, value)
            self._record_insert(key)
            return InsertOutcome.INSERTED

        current = self.root
        while True:
            if key > current.key:
                if current.right is None:
                    current.right = BSTNode(key, value)
                    break
                current = current.right
            elif key < current.key:
                if current.left is None:
                    current.left = BSTNode(key, value)
                    break
                current = current.left
            else:
                logger.debug("Rejected duplicate key %r", key)
                return InsertOutcome.DUPLICATE_KEY

        self._record_insert(key)
        return InsertOutcome.INSERTED

    def _record_insert(self, key: Any) -> None:
        self._size += 1
        self._mutations += 1
        logger.debug("Inserted key %r (size=%d)", key, self._size)

    # ---------- Lookup ----------

    def lookup(self, key: Any) -> LookupResult:
        """Return the value stored under ``key``.

        Returns:
            LookupResult with ``found=True`` and the value, or ``NOT_FOUND``.
        """
        node = self._find_node(key)
        if node is None:
            return NOT_FOUND
        return LookupResult(found=True, key=node.key, value=node.value)

    def _find_node(self, key: Any) -> Optional[BSTNode]:
        current = self.root
        while current is not None:
            if key > current.key:
                current = current.right
            elif key < current.key:
                current = current.left
            else:
                return current
        return None

    def get(self, key: Any, default: Any = None) -> Any:
        return self.lookup(key).value_or(default)

    def __getitem__(self, key: Any) -> Any:
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def __contains__(self, key: Any) -> bool:
        return self._find_node(key) is not None

    # ---------- Delete ----------

    def delete(self, key: Any) -> DeletionOutcome:
        """Remove the node holding ``key``.

        A node with two children takes over the key and value of its in-order
        predecessor (the rightmost node of its left subtree), and the
        predecessor is then unlinked from that subtree instead.

        Returns:
            DeletionOutcome.REMOVED, or DeletionOutcome.NOT_FOUND when the key
            is absent, which leaves the tree unchanged.
        """
        parent: Optional[BSTNode] = None
        node = self.root
        while node is not None:
            if key > node.key:
                parent, node = node, node.right
            elif key < node.key:
                parent, node = node, node.left
            else:
                break

        if node is None:
            return DeletionOutcome.NOT_FOUND

        if node.left is not None and node.right is not None:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            logger.debug("Deleting key %r by promoting predecessor %r", key, pred.key)
            node.key, node.value = pred.key, pred.value
            # pred has no right child, so this is the leaf or one-child case
            self._replace_child(pred_parent, pred, pred.left)
        else:
            survivor = node.left if node.left is not None else node.right
            logger.debug("Deleting key %r with %d child(ren)", key, node.child_count())
            self._replace_child(parent, node, survivor)

        self._size -= 1
        self._mutations += 1
        return DeletionOutcome.REMOVED

    def _replace_child(self, parent: Optional[BSTNode], child: BSTNode,
                       replacement: Optional[BSTNode]) -> None:
        """Point whichever slot held ``child`` at ``replacement`` instead."""
        if parent is None:
            self.root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def replace(self, key: Any, value: Any) -> bool:
        """Store ``value`` under ``key``, replacing any existing value wholesale.

        Implemented as delete followed by insert, so the old value object is
        never mutated.

        Returns:
            True if the key already existed.
        """
        existed = self.delete(key) is DeletionOutcome.REMOVED
        self.insert(key, value)
        return existed

    def clear(self) -> None:
        """Drop every node. Releasing the root releases the whole graph."""
        self.root = None
        self._size = 0
        self._mutations += 1

    # ---------- Traversal ----------

    def in_order_traversal(self) -> Iterator[Tuple[Any, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order.

        Each call starts a fresh, lazy walk. Mutating the tree while a walk
        is in progress raises ``ConcurrentModificationError`` on the walk's
        next step.
        """
        expected = self._mutations
        stack: List[BSTNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield (node.key, node.value)
            if self._mutations != expected:
                raise ConcurrentModificationError("OrderedTree changed during traversal")
            current = node.right

    items = in_order_traversal

    def keys(self) -> Iterator[Any]:
        for key, _ in self.in_order_traversal():
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self.in_order_traversal():
            yield value

    def __iter__(self) -> Iterator[Any]:
        return self.keys()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"

    # ---------- Shape ----------

    def minimum(self) -> LookupResult:
        """Return the smallest key and its value, or NOT_FOUND when empty."""
        node = self.root
        if node is None:
            return NOT_FOUND
        while node.left is not None:
            node = node.left
        return LookupResult(found=True, key=node.key, value=node.value)

    def maximum(self) -> LookupResult:
        """Return the largest key and its value, or NOT_FOUND when empty."""
        node = self.root
        if node is None:
            return NOT_FOUND
        while node.right is not None:
            node = node.right
        return LookupResult(found=True, key=node.key, value=node.value)

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (empty tree = 0)."""
        best = 0
        stack = [(self.root, 1)] if self.root is not None else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            for child in node.children():
                stack.append((child, depth + 1))
        return best

    # ---------- Diagnostics ----------

    def validate(self) -> List[str]:
        """Check the BST property and node graph.

        Returns:
            List of problems found (empty if the tree is sound)
        """
        errors = []
        seen = set()
        count = 0
        # Each entry carries the exclusive (low, high) key bounds for its subtree
        stack: List[Tuple[BSTNode, Optional[Tuple[Any]], Optional[Tuple[Any]]]] = []
        if self.root is not None:
            stack.append((self.root, None, None))
        while stack:
            node, low, high = stack.pop()
            if id(node) in seen:
                errors.append(f"node {node.identifier()} is reachable more than once")
                continue
            seen.add(id(node))
            count += 1
            if low is not None and not node.key > low[0]:
                errors.append(f"key {node.key!r} is not greater than ancestor key {low[0]!r}")
            if high is not None and not node.key < high[0]:
                errors.append(f"key {node.key!r} is not less than ancestor key {high[0]!r}")
            if node.left is not None:
                stack.append((node.left, low, (node.key,)))
            if node.right is not None:
                stack.append((node.right, (node.key,), high))
        if count != self._size:
            errors.append(f"size is {self._size} but {count} nodes are reachable")
        return errors

    def check_invariants(self) -> None:
        """Raise InvariantViolationError if ``validate`` finds any problem."""
        errors = self.validate()
        if errors:
            raise InvariantViolationError("; ".join(errors))
