#!/usr/bin/env python3
"""
Keep a table of request routes in an OrderedTree.

This example demonstrates:
- Registering handlers and rejecting duplicate routes
- Listing routes in sorted order
- Replacing and removing a route
- Inspecting the tree shape with the traversal API
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from orderedtreelib import OrderedTree, InsertOutcome, get_tree_stats, collect_tree_data, DataRequirement


def main():
    routes = OrderedTree()

    for path, handler in [
        ("/users", "list_users"),
        ("/health", "health_check"),
        ("/users/new", "create_user"),
        ("/about", "about_page"),
        ("/users", "shadow_handler"),
    ]:
        if routes.insert(path, handler) is InsertOutcome.DUPLICATE_KEY:
            print(f"Route {path} already registered, keeping {routes[path]}")

    print("\nRoutes:")
    for path, handler in routes.in_order_traversal():
        print(f"  {path:<12} -> {handler}")

    routes.replace("/health", "health_check_v2")
    routes.delete("/about")

    print("\nAfter update:")
    for path, handler in routes.items():
        print(f"  {path:<12} -> {handler}")

    print("\nShape (breadth-first):")
    for info in collect_tree_data(routes, DataRequirement.DEPTH, strategy="bfs"):
        print(f"  {'  ' * info['depth']}{info['key']}")

    print(f"\nStats: {get_tree_stats(routes)}")


if __name__ == "__main__":
    main()
