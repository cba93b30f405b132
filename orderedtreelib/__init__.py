"""OrderedTreeLib - an unbalanced binary search tree with pluggable traversals.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree()
    tree.insert(5, "five")
    tree.lookup(5).value          # "five"
    tree.delete(5)                # DeletionOutcome.REMOVED
    list(tree.in_order_traversal())
━━━━━━━━━━━━━━━━━━━━━━━━━━

Other walks (pre-order, post-order, breadth-first, level-order) and data
collection go through ``orderedtreelib.api`` or an ``ExecutionPlan``.
"""

__version__ = "0.1.0"

from .tree import OrderedTree
from .errors import (
    OrderedTreeError,
    DuplicateKeyError,
    KeyNotFoundError,
    InvariantViolationError,
    ConcurrentModificationError,
    ConfigurationError,
    InsertOutcome,
    DeletionOutcome,
    LookupResult,
    NOT_FOUND,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import ExecutionPlan
from .api import (
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_tree_stats,
    build_tree,
)
from . import core

__all__ = [
    "__version__",
    "OrderedTree",
    "OrderedTreeError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "InvariantViolationError",
    "ConcurrentModificationError",
    "ConfigurationError",
    "InsertOutcome",
    "DeletionOutcome",
    "LookupResult",
    "NOT_FOUND",
    "TraversalConfig",
    "TraversalStrategy",
    "DataRequirement",
    "DepthConfig",
    "FilterConfig",
    "ExecutionPlan",
    "traverse_tree",
    "collect_tree_data",
    "count_nodes",
    "find_nodes",
    "get_tree_stats",
    "build_tree",
    "core",
]
