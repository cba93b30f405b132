#!/usr/bin/env python3
"""
Run the scripts under examples/ to make sure they keep working.
"""

import importlib.util
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def load_example(name):
    """Import an example script as a module without running its __main__ block."""
    spec = importlib.util.spec_from_file_location(f"example_{name}", EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_route_index_example(capsys):
    """The route table example registers, lists, updates and summarises routes."""
    load_example("route_index").main()

    output = capsys.readouterr().out

    assert "Route /users already registered, keeping list_users" in output
    routes_section = output.split("Routes:")[1].split("After update:")[0]
    listed = [line.split()[0] for line in routes_section.strip().splitlines()]
    assert listed == ["/about", "/health", "/users", "/users/new"]

    updated_section = output.split("After update:")[1].split("Shape")[0]
    assert "health_check_v2" in updated_section
    assert "/about" not in updated_section
    assert "'total_nodes': 3" in output
