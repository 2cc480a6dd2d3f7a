"""Diagram rendering for treeprint.

The renderer walks a node depth-first and emits one line per node:

    .
    ├─ A
    │   └─ B
    └─ C

Each line starts with one column group per ancestor level (a vertical link
while that ancestor still has siblings below it, blanks once it was the last
one), followed by the node's own connector and its label.
"""

import io
import logging
from typing import Any, List, Optional, Sequence, TextIO, TYPE_CHECKING

from ..config import EdgeType, RenderConfig
from ..errors import InvalidConfigError
from .adapter import NodeAdapter, TreeAdapter

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger(__name__)


def format_label(meta: Any, value: Any) -> str:
    """Format a node label, prefixing bracketed metadata when present.

    Only ``None`` means "no metadata"; ``0`` or ``""`` are still shown.
    """
    if meta is None:
        return f"{value}"
    return f"[{meta}]  {value}"


class TreeRenderer:
    """Renders a node and its descendants as a box-drawing diagram.

    The renderer holds no per-render state, so one instance can be reused
    for any number of trees. Rendering never mutates the tree.
    """

    def __init__(self,
                 config: Optional[RenderConfig] = None,
                 adapter: Optional[TreeAdapter] = None):
        """Initialize renderer.

        Args:
            config: Render settings (module globals when omitted)
            adapter: Navigation adapter (NodeAdapter when omitted)

        Raises:
            InvalidConfigError: If the config does not validate
        """
        self.config = config or RenderConfig()
        errors = self.config.validate()
        if errors:
            raise InvalidConfigError(errors)
        self.adapter = adapter or NodeAdapter()

    def render(self, node: 'Node') -> str:
        """Render a node to a string."""
        buf = io.StringIO()
        self.write(node, buf)
        return buf.getvalue()

    def write(self, node: 'Node', out: TextIO) -> None:
        """Render a node into a text stream.

        A parentless node is drawn as the diagram root without a connector.
        A node that still has a parent is drawn with its own connector at
        level 0, as it would appear inside a larger tree.
        """
        logger.debug("Rendering %r", node)

        level = 0
        levels_ended: List[int] = []
        children = list(self.adapter.get_children(node))

        if self.adapter.get_parent(node) is None:
            out.write(format_label(node.meta, node.value))
            out.write("\n")
        else:
            edge = EdgeType.MID
            if not children:
                edge = EdgeType.END
                levels_ended.append(level)
            self.print_values(out, 0, levels_ended, edge, node)

        if children:
            self.print_nodes(out, level, levels_ended, children)

    def print_nodes(self,
                    out: TextIO,
                    level: int,
                    levels_ended: List[int],
                    nodes: Sequence['Node']) -> None:
        """Emit a run of siblings and, recursively, their subtrees.

        Args:
            out: Text stream to write to
            level: Depth of the siblings below the render root
            levels_ended: Depths whose ancestor was a last sibling
            nodes: Siblings in render order
        """
        for i, node in enumerate(nodes):
            edge = EdgeType.MID
            if i == len(nodes) - 1:
                # Copy so the ended level never leaks into other branches
                levels_ended = levels_ended + [level]
                edge = EdgeType.END

            self.print_values(out, level, levels_ended, edge, node)

            children = list(self.adapter.get_children(node))
            if children:
                self.print_nodes(out, level + 1, levels_ended, children)

    def print_values(self,
                     out: TextIO,
                     level: int,
                     levels_ended: List[int],
                     edge: EdgeType,
                     node: 'Node') -> None:
        """Emit a single node line: ancestor columns, connector, label."""
        indent = self.config.indent()
        link = self.config.glyph(EdgeType.LINK)

        for i in range(level):
            if i in levels_ended:
                out.write(" " * (indent + 1))
                continue
            out.write(f"{link}{' ' * indent}")

        value = self.render_value(level, levels_ended, node)
        out.write(f"{self.config.glyph(edge)} {format_label(node.meta, value)}\n")

    def render_value(self, level: int, levels_ended: List[int], node: 'Node') -> str:
        """Return the node's text with continuation lines aligned.

        Single-line values are returned as they are. Every line after the
        first is prefixed with the padding for the node's position.
        """
        lines = f"{node.value}".split("\n")
        if len(lines) < 2:
            return lines[0]

        pad = self.padding(level, levels_ended)
        return "\n".join([lines[0]] + [f"{pad}{line}" for line in lines[1:]])

    def padding(self, level: int, levels_ended: List[int]) -> str:
        """Build the prefix for continuation lines of a multi-line value.

        One column group per level from the render root down to the node's
        own level: blank where that level has ended (its node was the last
        sibling, nothing below to link to), otherwise a vertical link.

        Only the walk's own bookkeeping is consulted, never parent links, so
        a descendant detached with ``as_branch()`` still pads as it is drawn.
        """
        indent = self.config.indent()
        blank = " " * (indent + 1)
        linked = f"{self.config.glyph(EdgeType.LINK)}{' ' * indent}"

        return "".join(
            blank if i in levels_ended else linked
            for i in range(level + 1)
        )
