from __future__ import annotations

"""
Directory Tree Builder.

Walks a root directory depth-first and constructs the linked TreeNode
hierarchy consumed by the renderer. Each level is listed, optionally
stripped of regular files, sorted by name and recursed into. Any listing
failure aborts the whole build: no partial tree is ever returned.
"""

import logging
from typing import Callable, List, Optional

from dirtree.domain.errors import ListingError
from dirtree.domain.tree_models import DirEntry, Tree, TreeNode
from dirtree.infra.fs import join_path, list_directory

logger = logging.getLogger(__name__)

Lister = Callable[[str], List[DirEntry]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

class TreeBuilder:
    """
    Builds the in-memory tree for one root path.

    Args:
        root_path: Directory whose contents become the top-level Tree.
        include_files: Keep regular files; otherwise only directories.
        lister: Directory-listing capability, replaceable in tests.
    """

    def __init__(
            self,
            root_path: str,
            include_files: bool = False,
            lister: Lister = list_directory,
    ):
        self.root_path = root_path
        self.include_files = include_files
        self._lister = lister

    def build(self) -> Tree:
        """
        Build the full tree under the root path.

        Returns:
            Tree: Sorted top-level nodes (empty for an empty directory).

        Raises:
            ListingError: If any directory along the walk cannot be listed.
        """
        logger.info(f"Building directory tree for: {self.root_path}")
        return self._build_level(self.root_path, None)

    def _build_level(self, path: str, parent: Optional[TreeNode]) -> Tree:
        try:
            entries = self._lister(path)
        except ListingError as e:
            # The caller reports the failure
            logger.debug(f"Aborting build: {e}")
            raise

        if not self.include_files:
            entries = remove_files(entries)

        entries = sorted(entries, key=lambda e: e.name)
        total = len(entries)

        level: Tree = []
        for i, entry in enumerate(entries):
            node = TreeNode(entry=entry, is_last=(i == total - 1), parent=parent)

            if entry.is_dir:
                node.children = self._build_level(join_path(path, entry.name), node)

            level.append(node)

        return level


def build_tree(
        root_path: str,
        include_files: bool = False,
        lister: Lister = list_directory,
) -> Tree:
    """
    Build the linked tree for a root directory.

    Args:
        root_path: Directory to walk.
        include_files: Keep regular files in the tree.
        lister: Directory-listing capability.

    Returns:
        Tree: Top-level nodes of the hierarchy.

    Raises:
        ListingError: If the root or any subdirectory cannot be listed.
    """
    return TreeBuilder(root_path, include_files, lister).build()


def remove_files(entries: List[DirEntry]) -> List[DirEntry]:
    """Drop non-directory entries, keeping the relative order of the rest."""
    return [e for e in entries if e.is_dir]
