from __future__ import annotations

"""
Asset Tree Data Models.

Provides the recursive node type produced by the tree builder and consumed
by the code renderer, plus the tagged result of entry classification.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# NODE KINDS
# -----------------------------------------------------------------------------

class NodeKind(Enum):
    CONTAINER = "container"
    CONTENT = "content"


class EntryKind(Enum):
    CONTAINER = "container"
    CONTENT = "content"
    IGNORED = "ignored"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetNode:
    """
    Represents a single entry of the asset tree.

    Attributes:
        kind: Grouping (container) or terminal asset reference (content).
        name: Directory name for containers, suffix-stripped asset name for content.
        children: Ordered child nodes. Always None on content leaves.
    """
    kind: NodeKind
    name: str
    children: Optional[Tuple["AssetNode", ...]] = None

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    def content_children(self) -> Tuple["AssetNode", ...]:
        """Leaf children in listing order."""
        return tuple(c for c in self.children or () if c.kind is NodeKind.CONTENT)

    def container_children(self) -> Tuple["AssetNode", ...]:
        """Nested grouping children in listing order."""
        return tuple(c for c in self.children or () if c.kind is NodeKind.CONTAINER)


@dataclass(frozen=True)
class EntryClass:
    """
    Outcome of classifying one directory entry name.

    Attributes:
        kind: Container, content leaf or ignored entry.
        asset_name: Bare asset name, only set for content leaves.
    """
    kind: EntryKind
    asset_name: str = ""
