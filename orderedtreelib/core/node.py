"""Node types for OrderedTreeLib.

``TreeNode`` is the minimal interface the traversal machinery relies on.
``BSTNode`` is the concrete vertex of an ``OrderedTree``: a key, a value and
two owned child slots. Nodes carry no parent back-reference; operations that
need the parent track it while walking down from the root.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional


class TreeNode(ABC):
    """Abstract base class for nodes the traversers can walk.

    The node is a data container. How to reach its children is decided by
    a ``TreeAdapter``, so the same node type can be walked in several orders.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return an identifier that is unique within the tree.

        Returns:
            str: Unique, stable identifier for this node
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node.

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"


class BSTNode(TreeNode):
    """One vertex of a binary search tree.

    ``left`` and ``right`` each exclusively own their subtree or are None.
    ``key`` and ``value`` are only rewritten in place by the predecessor
    promotion step of a two-child deletion.
    """

    __slots__ = ("key", "value", "left", "right")

    def __init__(self, key: Any, value: Any,
                 left: Optional["BSTNode"] = None,
                 right: Optional["BSTNode"] = None):
        self.key = key
        self.value = value
        self.left = left
        self.right = right

    def identifier(self) -> str:
        return repr(self.key)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children(self) -> Iterator["BSTNode"]:
        """Yield the present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def child_count(self) -> int:
        return (self.left is not None) + (self.right is not None)

    def metadata(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'value': self.value,
            'child_count': self.child_count(),
            'is_leaf': self.is_leaf(),
        }

    def item(self):
        """Return the ``(key, value)`` pair held by this node."""
        return (self.key, self.value)
