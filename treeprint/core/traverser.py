"""Depth-first walk over a tree of nodes.

The walk goes through a TreeAdapter and yields ``(node, depth)`` tuples,
with depth relative to the starting node. Search, ``Node.visit_all`` and the
functional helpers in ``treeprint.api`` all share this order.
"""

from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING

from .adapter import TreeAdapter

if TYPE_CHECKING:
    from .node import Node


class DepthFirstPreOrderTraverser:
    """Depth-first pre-order traversal.

    Visits a node, then its whole subtree, then its next sibling. This is
    the order nodes appear in a rendered diagram.
    """

    def __init__(self, adapter: TreeAdapter):
        self.adapter = adapter

    def traverse(self,
                 root: 'Node',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['Node', int]]:
        """Walk the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Deepest level to visit (None = unlimited)
            min_depth: Shallowest level to yield

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        # Explicit stack; children pushed in reverse so the first pops first
        stack: List[Tuple['Node', int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if depth >= min_depth:
                yield (node, depth)

            if max_depth is not None and depth >= max_depth:
                continue

            children = list(self.adapter.get_children(node))
            for child in reversed(children):
                stack.append((child, depth + 1))
