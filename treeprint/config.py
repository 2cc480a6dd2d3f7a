"""Configuration for treeprint.

Two layers of configuration exist:

* Module globals (``INDENT_SIZE`` and the ``EDGE_*`` glyphs). They are read
  at render time, so assigning to them changes every later render in the
  process. Callers sharing a process must serialize such changes.
* ``RenderConfig``, a per-renderer value. Any field left as ``None`` falls
  back to the module global, so an empty ``RenderConfig()`` renders exactly
  like the globals do.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import InvalidConfigError

logger = logging.getLogger(__name__)


# Number of spaces per tree level.
INDENT_SIZE = 3

EDGE_LINK = "│"
EDGE_MID = "├─"
EDGE_END = "└─"


class EdgeType(Enum):
    """Connector kinds used when drawing a line of the tree.

    The glyph for each kind is looked up through the module globals (or a
    RenderConfig override), not stored on the enum, so it can be replaced.
    """
    LINK = "link"   # Vertical link for an ancestor with siblings below
    MID = "mid"     # Node followed by more siblings
    END = "end"     # Last node among its siblings

    @property
    def glyph(self) -> str:
        """Current process-wide glyph for this edge type."""
        return {
            EdgeType.LINK: EDGE_LINK,
            EdgeType.MID: EDGE_MID,
            EdgeType.END: EDGE_END,
        }[self]


def set_indent_size(size: int) -> None:
    """Set the process-wide indent width.

    Raises:
        InvalidConfigError: If size is not a non-negative integer
    """
    global INDENT_SIZE

    errors = _indent_errors(size)
    if errors:
        raise InvalidConfigError(errors)

    logger.debug("Global indent size changed from %d to %d", INDENT_SIZE, size)
    INDENT_SIZE = size


@dataclass
class RenderConfig:
    """Per-renderer settings.

    Each field overrides the matching module global when set.
    """

    indent_size: Optional[int] = None
    link: Optional[str] = None
    mid: Optional[str] = None
    end: Optional[str] = None

    def indent(self) -> int:
        """Effective indent width."""
        return INDENT_SIZE if self.indent_size is None else self.indent_size

    def glyph(self, edge: EdgeType) -> str:
        """Effective glyph for an edge type."""
        override = {
            EdgeType.LINK: self.link,
            EdgeType.MID: self.mid,
            EdgeType.END: self.end,
        }[edge]
        return edge.glyph if override is None else override

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.indent_size is not None:
            errors.extend(_indent_errors(self.indent_size))

        for name in ("link", "mid", "end"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, str):
                errors.append(f"{name} glyph must be a string")
            elif not value:
                errors.append(f"{name} glyph cannot be empty")

        return errors

    @classmethod
    def ascii(cls, indent_size: Optional[int] = None) -> 'RenderConfig':
        """Create a config drawing with plain ASCII connectors.

        Args:
            indent_size: Optional indent width override

        Returns:
            RenderConfig drawing with "|", "|-" and "`-"
        """
        return cls(indent_size=indent_size, link="|", mid="|-", end="`-")


def _indent_errors(size) -> List[str]:
    # bool is an int subclass but never a meaningful width
    if isinstance(size, bool) or not isinstance(size, int):
        return [f"indent size must be an integer, got {type(size).__name__}"]
    if size < 0:
        return ["indent size cannot be negative"]
    return []
