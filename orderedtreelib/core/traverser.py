"""Tree traversal strategies for OrderedTreeLib.

Traversers implement different algorithms for walking through trees and
work through a TreeAdapter. Every traverser here keeps its own explicit
stack or queue instead of recursing, so a degenerate (linear) tree of any
height can be walked without hitting the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .adapter import TreeAdapter
from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None means an empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal for binary trees.

    Visits the left subtree, then the node, then the right subtree. On a
    binary search tree this yields nodes in ascending key order. The adapter
    must provide ``get_left`` and ``get_right``.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []

        def _push_left_spine(node: Optional[TreeNode], depth: int) -> None:
            while node is not None:
                stack.append((node, depth))
                if not self._should_explore(depth, max_depth):
                    return
                node = self.adapter.get_left(node)
                depth += 1

        _push_left_spine(root, 0)
        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                _push_left_spine(self.adapter.get_right(node), depth + 1)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children. For a BST the resulting key sequence
    rebuilds the same shape when inserted into an empty tree.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = list(self.adapter.get_children(node))
                # Reversed so the first child is popped first
                for child in reversed(children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent, which is the order in which a subtree
    can be released bottom-up.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        # Entries are (node, depth, children_already_pushed)
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue
            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = list(self.adapter.get_children(node))
                for child in reversed(children):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Yields the same order as breadth-first, but finishes collecting a whole
    level before moving on to the next one.
    """

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        current_level: List[TreeNode] = [root] if root is not None else []
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[TreeNode] = []
            for node in current_level:
                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth)
                if self._should_explore(current_depth, max_depth) and not node.is_leaf():
                    next_level.extend(self.adapter.get_children(node))
            current_level = next_level
            current_depth += 1


def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (in_order, bfs, dfs_pre, dfs_post, level)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'in_order': InOrderTraverser,
        'inorder': InOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
