"""Tests for the high-level API, TraversalConfig and ExecutionPlan."""

import pytest

from orderedtreelib import (
    OrderedTree,
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
    ExecutionPlan,
    ConfigurationError,
    DuplicateKeyError,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_tree_stats,
    build_tree,
)
from orderedtreelib.core import BSTAdapter, CustomCollector


class TestHighLevelApi:

    def test_traverse_tree_defaults_to_in_order(self, sample_tree):
        assert [n.key for n in traverse_tree(sample_tree)] == [1, 3, 4, 5, 7, 8, 9]

    def test_traverse_tree_by_strategy_name(self, sample_tree):
        keys = [n.key for n in traverse_tree(sample_tree, strategy="dfs_post")]
        assert keys == [1, 4, 3, 7, 9, 8, 5]

    def test_traverse_tree_unknown_strategy(self, sample_tree):
        with pytest.raises(ValueError):
            list(traverse_tree(sample_tree, strategy="sideways"))

    def test_collect_items(self, sample_tree):
        assert list(collect_tree_data(sample_tree)) == list(sample_tree.in_order_traversal())

    def test_collect_keys_breadth_first(self, sample_tree):
        keys = list(collect_tree_data(sample_tree, DataRequirement.KEY, strategy="bfs"))
        assert keys == [5, 3, 8, 1, 4, 7, 9]

    def test_collect_values_with_limit(self, sample_tree):
        values = list(collect_tree_data(sample_tree, DataRequirement.VALUE, max_nodes=2))
        assert values == ["v1", "v3"]

    def test_collect_depth_info(self, sample_tree):
        shape = list(collect_tree_data(sample_tree, DataRequirement.DEPTH, max_depth=0))
        assert shape == [{'key': 5, 'depth': 0, 'child_count': 2, 'is_leaf': False}]

    def test_count_nodes(self, sample_tree):
        assert count_nodes(sample_tree) == 7
        assert count_nodes(sample_tree, max_depth=1) == 3
        assert count_nodes(OrderedTree()) == 0

    def test_find_nodes(self, sample_tree):
        found = [n.key for n in find_nodes(sample_tree, lambda n: n.key % 2 == 0)]
        assert found == [4, 8]

    def test_find_nodes_max_results(self, sample_tree):
        found = [n.key for n in find_nodes(sample_tree, lambda n: n.key > 2, max_results=2)]
        assert found == [3, 4]

    def test_exclude_filter(self, sample_tree):
        keys = [n.key for n in traverse_tree(sample_tree, exclude_filter=lambda n: n.key % 2 == 0)]
        assert keys == [1, 3, 5, 7, 9]

    def test_tree_stats(self, sample_tree):
        assert get_tree_stats(sample_tree) == {
            'total_nodes': 7,
            'leaf_nodes': 4,
            'height': 3,
            'min_key': 1,
            'max_key': 9,
        }

    def test_tree_stats_empty(self):
        assert get_tree_stats(OrderedTree()) == {
            'total_nodes': 0,
            'leaf_nodes': 0,
            'height': 0,
            'min_key': None,
            'max_key': None,
        }

    def test_build_tree(self):
        tree = build_tree([(2, "b"), (1, "a"), (2, "B")])
        assert list(tree.items()) == [(1, "a"), (2, "b")]

    def test_build_tree_strict(self):
        with pytest.raises(DuplicateKeyError):
            build_tree([(2, "b"), (2, "B")], strict=True)


class TestTraversalConfig:

    def test_defaults_are_valid(self):
        config = TraversalConfig()
        assert config.strategy is TraversalStrategy.IN_ORDER
        assert config.data_requirements is DataRequirement.ITEM
        assert config.validate() == []

    def test_collects_every_problem(self):
        config = TraversalConfig(
            strategy=TraversalStrategy.CUSTOM,
            depth=DepthConfig(min_depth=-1),
            max_nodes=0,
        )
        errors = config.validate()
        assert "min_depth cannot be negative" in errors
        assert "max_nodes must be positive" in errors
        assert "custom_traverser required when strategy is CUSTOM" in errors

    def test_max_below_min(self):
        config = TraversalConfig(depth=DepthConfig(min_depth=3, max_depth=1))
        assert "max_depth cannot be less than min_depth" in config.validate()

    def test_presets(self):
        assert TraversalConfig.sorted_items().validate() == []
        shape = TraversalConfig.shape(max_depth=2)
        assert shape.strategy is TraversalStrategy.BREADTH_FIRST
        assert shape.depth.max_depth == 2

    def test_filter_exclusion_wins(self):
        flt = FilterConfig(include_filter=lambda n: True, exclude_filter=lambda n: True)
        assert flt.should_include(object()) is False

    def test_depth_config_specific_depths(self):
        depth = DepthConfig(specific_depths={2})
        assert depth.should_yield(2)
        assert not depth.should_yield(1)
        assert depth.should_explore(1)
        assert not depth.should_explore(2)
        assert depth.effective_max_depth() == 2


class TestExecutionPlan:

    def test_invalid_config_rejected_up_front(self, sample_tree):
        config = TraversalConfig(depth=DepthConfig(max_depth=-1))
        with pytest.raises(ConfigurationError) as excinfo:
            ExecutionPlan(config, BSTAdapter(sample_tree))
        assert "max_depth cannot be negative" in str(excinfo.value)

    def test_configuration_error_is_value_error(self, sample_tree):
        with pytest.raises(ValueError):
            ExecutionPlan(TraversalConfig(max_nodes=-5), BSTAdapter(sample_tree))

    def test_specific_depths(self, sample_tree):
        config = TraversalConfig(
            depth=DepthConfig(specific_depths={2}),
            data_requirements=DataRequirement.KEY,
        )
        plan = ExecutionPlan(config, BSTAdapter(sample_tree))
        assert [data for _, data in plan.execute(sample_tree.root)] == [1, 4, 7, 9]

    def test_custom_collector(self, sample_tree):
        adapter = BSTAdapter(sample_tree)
        config = TraversalConfig(
            data_requirements=DataRequirement.CUSTOM,
            custom_collector=CustomCollector(adapter, lambda node, depth: (node.key, depth)),
        )
        plan = ExecutionPlan(config, adapter)
        result = [data for _, data in plan.execute(sample_tree.root)]
        assert result == [(1, 2), (3, 1), (4, 2), (5, 0), (7, 2), (8, 1), (9, 2)]

    def test_nodes_processed_counter(self, sample_tree):
        plan = ExecutionPlan(TraversalConfig(max_nodes=3), BSTAdapter(sample_tree))
        assert len(list(plan.execute(sample_tree.root))) == 3
        assert plan.nodes_processed == 3

    def test_empty_root(self):
        tree = OrderedTree()
        plan = ExecutionPlan(TraversalConfig(), BSTAdapter(tree))
        assert list(plan.execute(tree.root)) == []

    def test_summary(self, sample_tree):
        plan = ExecutionPlan(TraversalConfig.shape(), BSTAdapter(sample_tree))
        summary = plan.get_summary()
        assert summary['strategy'] == 'bfs'
        assert summary['data_requirements'] == 'depth'
        assert summary['adapter'] == 'BSTAdapter'
        assert summary['traverser'] == 'BreadthFirstTraverser'
        assert summary['collector'] == 'DepthCollector'
