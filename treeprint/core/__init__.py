"""Core abstractions for treeprint.

This package contains the node model, the navigation adapter, the depth-first
walk and the renderer.
"""

from .node import Node, NodeVisitor
from .adapter import TreeAdapter, NodeAdapter
from .traverser import DepthFirstPreOrderTraverser
from .renderer import TreeRenderer, format_label
from .equality import deep_equal

__all__ = [
    "Node",
    "NodeVisitor",
    "TreeAdapter",
    "NodeAdapter",
    "DepthFirstPreOrderTraverser",
    "TreeRenderer",
    "format_label",
    "deep_equal",
]
