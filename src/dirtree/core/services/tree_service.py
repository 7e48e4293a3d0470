from __future__ import annotations

"""
Directory Tree Service.

Orchestrates a full run: build the tree, render it, then hand the text
to the output sink. The tree is fully built and rendered before a single
byte is written, so a listing failure never produces partial output.
"""

import logging
from dataclasses import dataclass
from typing import TextIO, Tuple

from dirtree.core.analysis.tree_builder import Lister, build_tree
from dirtree.core.analysis.tree_renderer import render_tree
from dirtree.domain.tree_models import Tree
from dirtree.infra.fs import list_directory
from dirtree.infra.output import write_output

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeResult:
    """
    Outcome of a successful tree generation.

    Attributes:
        root_path: Directory that was walked.
        include_files: Whether regular files were listed.
        text: Rendered diagram as written to the sink.
        dir_count: Number of directory lines.
        file_count: Number of file lines.
    """
    root_path: str
    include_files: bool
    text: str
    dir_count: int = 0
    file_count: int = 0

    @property
    def node_count(self) -> int:
        return self.dir_count + self.file_count

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        out: TextIO,
        path: str,
        include_files: bool = False,
        lister: Lister = list_directory,
) -> TreeResult:
    """
    Build, render and write the tree for a directory.

    Args:
        out: Output sink receiving the rendered text.
        path: Root directory to walk.
        include_files: Include regular files with their sizes.
        lister: Directory-listing capability.

    Returns:
        TreeResult: Rendered text and node statistics.

    Raises:
        ListingError: If any directory cannot be listed (nothing written).
        WriteError: If the sink rejects the output.
    """
    logger.info(f"Generating directory tree for: {path}")

    tree = build_tree(path, include_files, lister=lister)
    text = render_tree(tree)
    dirs, files = count_nodes(tree)
    logger.debug(f"Tree built: {dirs} directories, {files} files")

    write_output(out, text)
    logger.info("Tree written to output")

    return TreeResult(
        root_path=path,
        include_files=include_files,
        text=text,
        dir_count=dirs,
        file_count=files,
    )


def count_nodes(tree: Tree) -> Tuple[int, int]:
    """Count (directories, files) recursively."""
    dirs = 0
    files = 0
    for node in tree:
        if node.is_dir:
            dirs += 1
            sub_dirs, sub_files = count_nodes(node.children)
            dirs += sub_dirs
            files += sub_files
        else:
            files += 1
    return dirs, files
