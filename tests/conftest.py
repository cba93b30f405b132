"""Shared pytest configuration for the OrderedTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory (package) and this directory (shared helpers) to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from tree_fixtures import build_sample_tree


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running stress tests (skipped by run_tests.py unless --slow)"
    )


@pytest.fixture
def sample_tree():
    """Fresh copy of the shared sample tree (see tree_fixtures)."""
    return build_sample_tree()
