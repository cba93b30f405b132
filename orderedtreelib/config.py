"""Configuration system for OrderedTreeLib traversals.

Defines how callers describe a walk over a tree: the visiting order, what
data to collect from each node, depth limits and node filters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Set


class TraversalStrategy(Enum):
    """Order in which nodes are visited."""
    IN_ORDER = "in_order"           # Left, node, right (ascending keys)
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level
    LEVEL_ORDER = "level"           # Grouped by level
    CUSTOM = "custom"               # User-defined traverser


class DataRequirement(Enum):
    """What to collect from each visited node."""
    KEY = "key"
    VALUE = "value"
    ITEM = "item"                   # (key, value) pair
    FULL_NODE = "full"
    DEPTH = "depth"                 # key, depth and child count
    CUSTOM = "custom"               # User-defined collector


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, node) -> bool:
        """Check if a node passes the filters.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.include_filter:
            return self.include_filter(node)
        return True


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        if self.specific_depths is not None:
            return depth in self.specific_depths
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        if self.specific_depths is not None:
            return any(d > depth for d in self.specific_depths)
        if self.max_depth is not None:
            return depth < self.max_depth
        return True

    def effective_max_depth(self) -> Optional[int]:
        """Deepest level the traverser needs to reach, or None for unlimited."""
        if self.specific_depths is not None:
            return max(self.specific_depths) if self.specific_depths else 0
        return self.max_depth


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The ExecutionPlan validates this configuration and assembles the
    traverser and collector it describes.
    """

    strategy: TraversalStrategy = TraversalStrategy.IN_ORDER
    custom_traverser: Optional[Any] = None

    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    data_requirements: DataRequirement = DataRequirement.ITEM
    custom_collector: Optional[Any] = None

    max_nodes: Optional[int] = None  # Stop after yielding this many nodes

    @classmethod
    def sorted_items(cls) -> 'TraversalConfig':
        """Config for the ascending ``(key, value)`` walk."""
        return cls(strategy=TraversalStrategy.IN_ORDER,
                   data_requirements=DataRequirement.ITEM)

    @classmethod
    def shape(cls, max_depth: Optional[int] = None) -> 'TraversalConfig':
        """Config for inspecting the tree level by level."""
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
            data_requirements=DataRequirement.DEPTH,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.depth.specific_depths is not None:
            if any(d < 0 for d in self.depth.specific_depths):
                errors.append("specific_depths cannot contain negative depths")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
