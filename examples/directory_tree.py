#!/usr/bin/env python3
"""
Print a directory as a tree diagram.

This example demonstrates:
- Building a tree with branches and meta nodes
- File sizes shown as bracketed metadata
- Per-call render settings

Usage:
    python examples/directory_tree.py [path] [--depth N] [--ascii]
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

import treeprint
from treeprint import RenderConfig


def add_directory(branch, path: Path, depth: int, max_depth: int) -> None:
    """Add the entries of path under branch, directories first."""
    try:
        entries = sorted(path.iterdir(), key=lambda p: (not p.is_dir(), p.name.lower()))
    except PermissionError:
        branch.add_node("<permission denied>")
        return

    for entry in entries:
        if entry.is_dir():
            sub = branch.add_branchf("%s/", entry.name)
            if depth < max_depth:
                add_directory(sub, entry, depth + 1, max_depth)
        else:
            branch.add_meta_node(entry.stat().st_size, entry.name)


def main():
    parser = argparse.ArgumentParser(description="Print a directory tree")
    parser.add_argument("path", nargs="?", default=".", help="Directory to print")
    parser.add_argument("--depth", type=int, default=2, help="Maximum depth (default: 2)")
    parser.add_argument("--ascii", action="store_true", help="Use ASCII connectors")
    args = parser.parse_args()

    root_path = Path(args.path)
    if not root_path.is_dir():
        print(f"Error: '{root_path}' is not a directory", file=sys.stderr)
        return 1

    tree = treeprint.new_with_root(root_path.resolve().name or str(root_path))
    add_directory(tree, root_path, 1, args.depth)

    config = RenderConfig.ascii() if args.ascii else None
    print(tree.render(config), end="")

    leaves = list(treeprint.get_leaf_nodes(tree))
    deepest = max((leaf.depth() for leaf in leaves), default=0)
    print(f"\n{len(leaves)} leaf entries | max depth {deepest}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
