"""Execution planning for OrderedTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the actual
traversal: it picks the traverser and collector, applies filters and depth
limits, and stops at the configured node budget.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.adapter import TreeAdapter
from .core.collector import (
    DataCollector,
    DepthCollector,
    FullNodeCollector,
    ItemCollector,
    KeyCollector,
    ValueCollector,
)
from .core.node import TreeNode
from .core.traverser import TreeTraverser, create_traverser
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for a traversal.

    Raises ConfigurationError at construction time, before any node is
    visited, if the configuration is inconsistent.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Tree adapter for the tree being walked

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        strategy_map = {
            TraversalStrategy.IN_ORDER: "in_order",
            TraversalStrategy.BREADTH_FIRST: "bfs",
            TraversalStrategy.DEPTH_FIRST_PRE: "dfs_pre",
            TraversalStrategy.DEPTH_FIRST_POST: "dfs_post",
            TraversalStrategy.LEVEL_ORDER: "level",
        }
        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.KEY: KeyCollector,
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.ITEM: ItemCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.DEPTH: DepthCollector,
        }
        return collector_map[self.config.data_requirements](self.adapter)

    def execute(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start from (None walks an empty tree)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        depth_config = self.config.depth
        min_depth = depth_config.min_depth if depth_config.specific_depths is None else 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=depth_config.effective_max_depth(),
            min_depth=min_depth,
        ):
            if not self.config.filter.should_include(node):
                continue
            if not depth_config.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

            if self.config.max_nodes is not None and self.nodes_processed >= self.config.max_nodes:
                logger.debug("Stopping traversal after max_nodes=%d", self.config.max_nodes)
                break

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
