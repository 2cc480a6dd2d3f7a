"""treeprint - render trees of labeled nodes as box-drawing diagrams.

Build a tree, then print it:

    import treeprint

    tree = treeprint.new()
    tree.add_node("README.md")
    src = tree.add_branch("src")
    src.add_meta_node(120, "main.py")
    print(tree)

Glyphs and indent width are module globals in ``treeprint.config``; pass a
``RenderConfig`` to ``Node.render`` for per-call settings instead.
"""

__version__ = "0.1.0"

from . import config
from .config import (
    EdgeType,
    RenderConfig,
    set_indent_size,
)
from .errors import TreePrintError, InvalidConfigError
from .core import (
    Node,
    NodeVisitor,
    TreeAdapter,
    NodeAdapter,
    DepthFirstPreOrderTraverser,
    TreeRenderer,
    deep_equal,
)
from .api import (
    new,
    new_with_root,
    new_with_rootf,
    render,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
)

__all__ = [
    "__version__",
    "config",
    # Config
    "EdgeType",
    "RenderConfig",
    "set_indent_size",
    # Errors
    "TreePrintError",
    "InvalidConfigError",
    # Core
    "Node",
    "NodeVisitor",
    "TreeAdapter",
    "NodeAdapter",
    "DepthFirstPreOrderTraverser",
    "TreeRenderer",
    "deep_equal",
    # API
    "new",
    "new_with_root",
    "new_with_rootf",
    "render",
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
]
