"""High-level API for OrderedTreeLib.

Simple, functional helpers over an OrderedTree. They wrap the
config / plan / traverser machinery for the common cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalStrategy,
)
from .core.adapter import BSTAdapter
from .core.node import BSTNode
from .errors import DuplicateKeyError, InsertOutcome
from .planning import ExecutionPlan
from .tree import OrderedTree


def traverse_tree(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[BSTNode], bool]] = None,
    exclude_filter: Optional[Callable[[BSTNode], bool]] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[BSTNode]:
    """Walk the nodes of a tree.

    Args:
        tree: Tree to walk
        strategy: Traversal strategy (in_order, dfs_pre, dfs_post, bfs, level)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        max_nodes: Stop after this many nodes

    Yields:
        BSTNode instances that match the criteria

    Example:
        >>> tree = build_tree([(2, 'b'), (1, 'a'), (3, 'c')])
        >>> [node.key for node in traverse_tree(tree, strategy='dfs_pre')]
        [2, 1, 3]
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
        data_requirements=DataRequirement.FULL_NODE,
        max_nodes=max_nodes,
    )
    plan = ExecutionPlan(config, BSTAdapter(tree))
    for node, _ in plan.execute(tree.root):
        yield node


def collect_tree_data(
    tree: OrderedTree,
    data_requirement: DataRequirement = DataRequirement.ITEM,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.IN_ORDER,
    **kwargs
) -> Iterator[Any]:
    """Walk a tree and yield the collected data for each node.

    Args:
        tree: Tree to walk
        data_requirement: What data to collect
        strategy: Traversal strategy
        **kwargs: max_depth, min_depth, include_filter, exclude_filter, max_nodes

    Yields:
        Collected data, e.g. ``(key, value)`` pairs for DataRequirement.ITEM
    """
    config = _build_config(strategy, data_requirement, **kwargs)
    plan = ExecutionPlan(config, BSTAdapter(tree))
    for _, data in plan.execute(tree.root):
        yield data


def count_nodes(tree: OrderedTree, **kwargs) -> int:
    """Count nodes matching the given traversal criteria."""
    return sum(1 for _ in traverse_tree(tree, **kwargs))


def find_nodes(tree: OrderedTree,
               predicate: Callable[[BSTNode], bool],
               max_results: Optional[int] = None) -> Iterator[BSTNode]:
    """Yield nodes matching a predicate, in ascending key order.

    Example:
        >>> tree = build_tree((k, k * k) for k in range(5))
        >>> [n.key for n in find_nodes(tree, lambda n: n.value > 4)]
        [3, 4]
    """
    return traverse_tree(tree, include_filter=predicate, max_nodes=max_results)


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Summarise the size and shape of a tree.

    Returns:
        Dictionary with ``total_nodes``, ``leaf_nodes``, ``height``,
        ``min_key`` and ``max_key`` (None for an empty tree).
    """
    total = 0
    leaves = 0
    for node in traverse_tree(tree):
        total += 1
        if node.is_leaf():
            leaves += 1
    return {
        'total_nodes': total,
        'leaf_nodes': leaves,
        'height': tree.height(),
        'min_key': tree.minimum().key,
        'max_key': tree.maximum().key,
    }


def build_tree(items: Iterable[Tuple[Any, Any]], strict: bool = False) -> OrderedTree:
    """Build a tree by inserting ``(key, value)`` pairs one at a time.

    Args:
        items: Pairs to insert, in insertion order
        strict: Raise DuplicateKeyError on a repeated key instead of
            keeping the first value

    Raises:
        DuplicateKeyError: If ``strict`` and a key repeats
    """
    tree = OrderedTree()
    for key, value in items:
        if tree.insert(key, value) is InsertOutcome.DUPLICATE_KEY and strict:
            raise DuplicateKeyError(key)
    return tree


def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse a strategy given as enum or string."""
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'in_order': TraversalStrategy.IN_ORDER,
        'inorder': TraversalStrategy.IN_ORDER,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategy_map:
        raise ValueError(f"Unknown strategy: {strategy}")

    return strategy_map[strategy_lower]


def _build_config(strategy: Union[TraversalStrategy, str],
                  data_requirement: DataRequirement,
                  max_depth: Optional[int] = None,
                  min_depth: int = 0,
                  include_filter: Optional[Callable[[BSTNode], bool]] = None,
                  exclude_filter: Optional[Callable[[BSTNode], bool]] = None,
                  max_nodes: Optional[int] = None,
                  custom_collector: Optional[Any] = None) -> TraversalConfig:
    return TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(include_filter=include_filter, exclude_filter=exclude_filter),
        data_requirements=data_requirement,
        custom_collector=custom_collector,
        max_nodes=max_nodes,
    )
