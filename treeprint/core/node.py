"""Node model for treeprint.

A Node is a value, optional metadata and an ordered list of children, plus a
back reference to its parent. The parent link is only ever followed upwards
(to find out whether a node is the last of its siblings); ownership always
flows from parent to children.

Trees are built with the ``add_*`` methods:

    tree = Node(".")
    tree.add_node("A")
    tree.add_branch("B").add_node("C")
    print(tree)

prints:

    .
    ├─ A
    └─ B
        └─ C
"""

import io
import warnings
from typing import Any, Callable, Iterator, List, Optional, TextIO, Union, BinaryIO

from ..config import RenderConfig
from .adapter import NodeAdapter
from .equality import deep_equal
from .renderer import TreeRenderer
from .traverser import DepthFirstPreOrderTraverser

NodeVisitor = Callable[['Node'], None]

_ADAPTER = NodeAdapter()


class Node:
    """A node of a printable tree.

    Attributes:
        parent: Node owning this one in its ``children``, None for a root
        meta: Metadata shown as a ``[meta]`` prefix; None means no metadata
        value: Displayed payload, rendered with ``str()``
        children: Child nodes in insertion (and render) order
    """

    def __init__(self, value: Any = ".", meta: Any = None, parent: Optional['Node'] = None):
        self.parent = parent
        self.meta = meta
        self.value = value
        self.children: List['Node'] = []

    # Building

    def _append(self, meta: Any, value: Any) -> 'Node':
        child = Node(value, meta=meta, parent=self)
        self.children.append(child)
        return child

    def add_node(self, value: Any) -> 'Node':
        """Add a leaf holding value; returns self for chaining."""
        self._append(None, value)
        return self

    def add_nodef(self, fmt: str, *args: Any) -> 'Node':
        """Add a leaf with a printf-style label; returns self."""
        return self.add_node(_sprintf(fmt, args))

    def add_meta_node(self, meta: Any, value: Any) -> 'Node':
        """Add a leaf with metadata; returns self for chaining."""
        self._append(meta, value)
        return self

    def add_meta_nodef(self, meta: Any, fmt: str, *args: Any) -> 'Node':
        """Add a leaf with metadata and a printf-style label; returns self."""
        return self.add_meta_node(meta, _sprintf(fmt, args))

    def add_branch(self, value: Any) -> 'Node':
        """Add a child and return it, so deeper levels can be chained."""
        return self._append(None, value)

    def add_branchf(self, fmt: str, *args: Any) -> 'Node':
        """Add a child with a printf-style label and return it."""
        return self.add_branch(_sprintf(fmt, args))

    def add_meta_branch(self, meta: Any, value: Any) -> 'Node':
        """Add a child with metadata and return it."""
        return self._append(meta, value)

    def add_meta_branchf(self, meta: Any, fmt: str, *args: Any) -> 'Node':
        """Add a child with metadata and a printf-style label and return it."""
        return self.add_meta_branch(meta, _sprintf(fmt, args))

    def as_branch(self) -> 'Node':
        """Detach the parent link so the node renders as a standalone root.

        Children are untouched, and the parent still lists this node among
        its own children. Calling it on a parentless node has no effect.
        """
        self.parent = None
        return self

    branch = as_branch

    # Mutation

    def set_value(self, value: Any) -> None:
        self.value = value

    def set_valuef(self, fmt: str, *args: Any) -> None:
        self.value = _sprintf(fmt, args)

    def set_meta_value(self, meta: Any) -> None:
        self.meta = meta

    # Inspection and search

    def is_leaf(self) -> bool:
        return not self.children

    def is_last(self) -> bool:
        """Check whether this node is the last child of its parent."""
        return _ADAPTER.is_last(self)

    def depth(self) -> int:
        """Number of parent links between this node and its root."""
        return _ADAPTER.get_depth(self)

    def find_last_child(self) -> Optional['Node']:
        """Return the last child, or None when there are no children."""
        return _ADAPTER.get_last_child(self)

    def find_last_node(self) -> Optional['Node']:
        """Deprecated alias of find_last_child."""
        warnings.warn(
            "find_last_node is deprecated, use find_last_child instead.",
            DeprecationWarning,
            stacklevel=2
        )
        return self.find_last_child()

    def find_by_meta(self, meta: Any) -> Optional['Node']:
        """Find the first descendant whose metadata structurally equals meta.

        Descendants are checked in pre-order: each child, then its subtree,
        then the next child. The node itself is not checked.

        Returns:
            Matching node or None if not found
        """
        return self._find(lambda node: deep_equal(node.meta, meta))

    def find_by_value(self, value: Any) -> Optional['Node']:
        """Find the first descendant whose value structurally equals value.

        Same order and equality rules as find_by_meta.
        """
        return self._find(lambda node: deep_equal(node.value, value))

    def _find(self, predicate: Callable[['Node'], bool]) -> Optional['Node']:
        for node, _ in self._descendants():
            if predicate(node):
                return node
        return None

    def visit_all(self, fn: NodeVisitor) -> None:
        """Call fn on every descendant.

        Visits each child immediately followed by its full subtree, in child
        order. This is a depth-first walk, not level by level.
        """
        for node, _ in self._descendants():
            fn(node)

    def _descendants(self) -> Iterator[tuple]:
        traverser = DepthFirstPreOrderTraverser(_ADAPTER)
        return traverser.traverse(self, min_depth=1)

    # Rendering

    def render(self, config: Optional[RenderConfig] = None) -> str:
        """Render the tree (or subtree) with an optional per-call config."""
        return TreeRenderer(config, _ADAPTER).render(self)

    def string(self) -> str:
        """Render the tree or subtree as a string."""
        return self.render()

    def to_bytes(self) -> bytes:
        """Render the tree or subtree as UTF-8 encoded bytes."""
        return self.string().encode("utf-8")

    def write(self, sink: Union[TextIO, BinaryIO], config: Optional[RenderConfig] = None) -> None:
        """Render the tree or subtree into a text or binary stream.

        Binary streams receive UTF-8. Errors raised by the sink propagate.
        """
        TreeRenderer(config, _ADAPTER).write(self, _text_sink(sink))

    writer = write

    def __str__(self) -> str:
        return self.string()

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(value={self.value!r}, meta={self.meta!r}, "
                f"children={len(self.children)})")

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator['Node']:
        return iter(self.children)

    def __bool__(self) -> bool:
        # A leaf is still a node; don't let __len__ make it falsy
        return True


class _BinarySink:
    """Text-stream facade over a binary stream."""

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self._stream = stream
        self._encoding = encoding

    def write(self, text: str) -> int:
        self._stream.write(text.encode(self._encoding))
        return len(text)


def _text_sink(sink: Any) -> Any:
    if isinstance(sink, io.TextIOBase):
        return sink
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)) or 'b' in str(getattr(sink, 'mode', '')):
        return _BinarySink(sink)
    return sink


def _sprintf(fmt: str, args: tuple) -> str:
    return fmt % args if args else fmt
