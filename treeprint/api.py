"""High-level API for treeprint.

Factories for new trees, one-call rendering and functional helpers for
walking and filtering them. These wrap the object-oriented core for the
common cases.
"""

from typing import Any, Callable, Iterator, Optional

from .config import RenderConfig
from .core.adapter import NodeAdapter
from .core.node import Node, _sprintf
from .core.renderer import TreeRenderer
from .core.traverser import DepthFirstPreOrderTraverser


def new() -> Node:
    """Create a new tree whose root is labeled ``"."``."""
    return Node(".")


def new_with_root(root: Any) -> Node:
    """Create a new tree with the given root value."""
    return Node(root)


def new_with_rootf(fmt: str, *args: Any) -> Node:
    """Create a new tree with a printf-style root label.

    Example:
        >>> str(new_with_rootf("%s (%d)", "pkg", 3))
        'pkg (3)\\n'
    """
    return Node(_sprintf(fmt, args))


def render(root: Node, config: Optional[RenderConfig] = None, **kwargs) -> str:
    """Render a tree to a string.

    Args:
        root: Node to render (a subtree is fine)
        config: Render settings; built from kwargs when omitted
        **kwargs: RenderConfig fields (indent_size, link, mid, end)

    Returns:
        The diagram, one line per node, each ending in a newline

    Raises:
        InvalidConfigError: If the settings do not validate
    """
    if config is None:
        config = RenderConfig(**kwargs)
    return TreeRenderer(config, NodeAdapter()).render(root)


def traverse_tree(
    root: Node,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
) -> Iterator[Node]:
    """Walk a tree in diagram order, root first.

    Args:
        root: Starting node for traversal
        max_depth: Deepest level to visit
        min_depth: Shallowest level to yield
        include_filter: Keep only nodes it returns True for
        exclude_filter: Drop nodes it returns True for; wins over include_filter

    Yields:
        Nodes that match the criteria

    Example:
        >>> tree = new()
        >>> _ = tree.add_branch("a").add_node("b")
        >>> [n.value for n in traverse_tree(tree, min_depth=1)]
        ['a', 'b']
    """
    traverser = DepthFirstPreOrderTraverser(NodeAdapter())

    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        if exclude_filter and exclude_filter(node):
            continue
        if include_filter and not include_filter(node):
            continue
        yield node


def count_nodes(root: Node, **kwargs) -> int:
    """Count the nodes traverse_tree would yield, root included."""
    return sum(1 for _ in traverse_tree(root, **kwargs))


def find_nodes(
    root: Node,
    predicate: Callable[[Node], bool],
    **kwargs
) -> Iterator[Node]:
    """Find every node matching a predicate, in diagram order.

    Unlike ``Node.find_by_value`` this does not stop at the first match and
    includes the root itself.
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_leaf_nodes(root: Node, **kwargs) -> Iterator[Node]:
    """Get all leaf nodes in a tree."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node
