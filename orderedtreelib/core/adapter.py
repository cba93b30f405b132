"""TreeAdapter abstraction for OrderedTreeLib.

The adapter holds the navigation logic for a tree structure, so traversers
and collectors stay independent of how nodes are linked together.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, TYPE_CHECKING

from .node import TreeNode, BSTNode

if TYPE_CHECKING:
    from ..tree import OrderedTree


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific type of tree structure."""

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is root
        """
        pass

    @abstractmethod
    def get_depth(self, node: TreeNode) -> int:
        """Return the number of edges between the root and ``node``."""
        pass

    @abstractmethod
    def estimated_size(self, node: TreeNode) -> Optional[int]:
        """Return the node count of the subtree under ``node``, or None if unknown."""
        pass


class BSTAdapter(TreeAdapter):
    """Adapter for the nodes of an ``OrderedTree``.

    Nodes keep no parent link, so ``get_parent`` repeats the key comparison
    walk from the root. That costs O(height) per call.
    """

    def __init__(self, tree: "OrderedTree"):
        self.tree = tree

    def get_children(self, node: BSTNode) -> Iterator[BSTNode]:
        return node.children()

    def get_left(self, node: BSTNode) -> Optional[BSTNode]:
        return node.left

    def get_right(self, node: BSTNode) -> Optional[BSTNode]:
        return node.right

    def get_parent(self, node: BSTNode) -> Optional[BSTNode]:
        parent = None
        current = self.tree.root
        while current is not None and current is not node:
            parent = current
            if node.key < current.key:
                current = current.left
            else:
                current = current.right
        if current is None:
            raise ValueError(f"Node {node!r} does not belong to this tree")
        return parent

    def get_depth(self, node: BSTNode) -> int:
        depth = 0
        current = self.tree.root
        while current is not None and current is not node:
            depth += 1
            if node.key < current.key:
                current = current.left
            else:
                current = current.right
        if current is None:
            raise ValueError(f"Node {node!r} does not belong to this tree")
        return depth

    def estimated_size(self, node: BSTNode) -> Optional[int]:
        if node is self.tree.root:
            return len(self.tree)
        return None
