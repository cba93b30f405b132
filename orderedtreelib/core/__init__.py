"""Core building blocks: nodes, adapters, traversers and collectors."""

from .node import TreeNode, BSTNode
from .adapter import TreeAdapter, BSTAdapter
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    KeyCollector,
    ValueCollector,
    ItemCollector,
    FullNodeCollector,
    DepthCollector,
    CustomCollector,
)

__all__ = [
    'TreeNode',
    'BSTNode',
    'TreeAdapter',
    'BSTAdapter',
    'TreeTraverser',
    'InOrderTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'LevelOrderTraverser',
    'create_traverser',
    'DataCollector',
    'KeyCollector',
    'ValueCollector',
    'ItemCollector',
    'FullNodeCollector',
    'DepthCollector',
    'CustomCollector',
]
