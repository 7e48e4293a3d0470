from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the entry snapshots returned by the filesystem layer and the
linked nodes used by the builder and renderer to describe a directory
hierarchy. Nodes keep a back-reference to their parent so that ancestry
can be derived on demand instead of being stored per node.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirEntry:
    """
    Immutable snapshot of one filesystem entry at listing time.

    Attributes:
        name: Base name of the entry inside its directory.
        is_dir: True when the entry is a directory.
        size: Size in bytes as reported by the filesystem.
    """
    name: str
    is_dir: bool
    size: int = 0


@dataclass
class TreeNode:
    """
    One entry within the built hierarchy.

    Attributes:
        entry: The wrapped filesystem snapshot.
        is_last: True if this node sorts last among its siblings.
        parent: Enclosing directory node, None at the top level.
        children: Ordered listing of the directory (directories only).
    """
    entry: DirEntry
    is_last: bool = False
    parent: Optional["TreeNode"] = field(default=None, repr=False, compare=False)
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    @property
    def size(self) -> int:
        return self.entry.size

    @property
    def depth(self) -> int:
        """Number of ancestors between this node and the listing root."""
        return sum(1 for _ in self.iter_parents())

    def iter_parents(self) -> Iterator["TreeNode"]:
        """Yield ancestors from the immediate parent up to the top level."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent


Tree = List[TreeNode]
