"""Data collection strategies for OrderedTreeLib.

DataCollectors define what information to extract from nodes during
traversal, so one walk can produce keys, values, pairs or whole nodes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple

from .adapter import TreeAdapter
from .node import BSTNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: BSTNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class KeyCollector(DataCollector):
    """Collects only node keys."""

    def collect(self, node: BSTNode, depth: int) -> Any:
        return node.key


class ValueCollector(DataCollector):
    """Collects only node values."""

    def collect(self, node: BSTNode, depth: int) -> Any:
        return node.value


class ItemCollector(DataCollector):
    """Collects ``(key, value)`` pairs, the shape in-order traversal returns."""

    def collect(self, node: BSTNode, depth: int) -> Tuple[Any, Any]:
        return node.item()


class FullNodeCollector(DataCollector):
    """Collects the node object itself."""

    def collect(self, node: BSTNode, depth: int) -> BSTNode:
        return node


class DepthCollector(DataCollector):
    """Collects key, depth and child count, for inspecting tree shape.

    Children are counted through the adapter, so the count matches what
    the traverser itself would descend into.
    """

    def collect(self, node: BSTNode, depth: int) -> Dict[str, Any]:
        child_count = sum(1 for _ in self.adapter.get_children(node))
        return {
            'key': node.key,
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
        }


class CustomCollector(DataCollector):
    """Collector driven by a user function ``fn(node, depth)``."""

    def __init__(self, adapter: TreeAdapter, collect_fn: Callable[[BSTNode, int], Any]):
        super().__init__(adapter)
        self.collect_fn = collect_fn

    def collect(self, node: BSTNode, depth: int) -> Any:
        return self.collect_fn(node, depth)
