"""TreeAdapter abstraction for treeprint.

The adapter holds the navigation logic (children, parent, last child, depth),
keeping traversers and the renderer independent of how a node stores its
links.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree of nodes.

    Traversers and the renderer only ever move through the tree via an
    adapter, so the same algorithms work for any node type that can answer
    "who are your children" and "who is your parent".
    """

    @abstractmethod
    def get_children(self, node: 'Node') -> Iterator['Node']:
        """Get an iterator of child nodes, in render order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes
        """
        pass

    @abstractmethod
    def get_parent(self, node: 'Node') -> Optional['Node']:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is a root
        """
        pass

    def get_depth(self, node: 'Node') -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_last_child(self, node: 'Node') -> Optional['Node']:
        """Return the last child of a node, or None for a leaf."""
        last = None
        for last in self.get_children(node):
            pass
        return last

    def is_last(self, node: 'Node') -> bool:
        """Check whether a node is the last child of its parent.

        A parentless node has no siblings below it and counts as last.
        """
        parent = self.get_parent(node)
        if parent is None:
            return True
        return self.get_last_child(parent) is node


class NodeAdapter(TreeAdapter):
    """Adapter for treeprint's own Node type."""

    def get_children(self, node: 'Node') -> Iterator['Node']:
        return iter(node.children)

    def get_parent(self, node: 'Node') -> Optional['Node']:
        return node.parent

    def get_last_child(self, node: 'Node') -> Optional['Node']:
        return node.children[-1] if node.children else None
