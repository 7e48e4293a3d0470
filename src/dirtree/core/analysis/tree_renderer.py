from __future__ import annotations

"""
Tree Renderer.

Converts the linked Tree model into its text diagram. Prefixes are not
stored on the nodes: every line recomputes its indentation by walking
the parent chain, counting how deep the node sits and how many of its
ancestors still have siblings below them.
"""

from typing import List

from dirtree.domain.tree_models import Tree, TreeNode

BRANCH_MIDDLE = "├───"
BRANCH_LAST = "└───"
VERTICAL_BAR = "│"
INDENT = "\t"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(tree: Tree) -> str:
    """
    Render a Tree as text, one newline-terminated line per node.

    Args:
        tree: Top-level nodes produced by the builder.

    Returns:
        str: The diagram, or an empty string for an empty tree.
    """
    lines: List[str] = []
    _render_level(tree, lines)
    return "".join(lines)


def render_node_line(node: TreeNode) -> str:
    """
    Render a single node without its trailing newline.

    Format: <prefix><branch><name>[ <size-annotation>]
    """
    branch = BRANCH_LAST if node.is_last else BRANCH_MIDDLE
    line = f"{build_prefix(node)}{branch}{node.name}"

    if not node.is_dir:
        line += f" {format_size(node.size)}"

    return line


def build_prefix(node: TreeNode) -> str:
    """
    Compute the indentation of a node from its ancestry.

    One slot per ancestor. The first k slots, where k is the number of
    ancestors that are not last siblings, carry a vertical bar.
    """
    nesting = nesting_level(node)
    open_parents = open_ancestor_count(node)

    parts: List[str] = []
    for i in range(nesting):
        if i < open_parents:
            parts.append(VERTICAL_BAR)
        parts.append(INDENT)
    return "".join(parts)


def nesting_level(node: TreeNode) -> int:
    """Number of ancestors of the node."""
    return node.depth


def open_ancestor_count(node: TreeNode) -> int:
    """Number of ancestors that are not the last sibling in their group."""
    return sum(1 for parent in node.iter_parents() if not parent.is_last)


def format_size(size: int) -> str:
    """Size annotation for a file line."""
    if size == 0:
        return "(empty)"
    return f"({size}b)"

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_level(tree: Tree, lines: List[str]) -> None:
    """Append each node's line, then its subtree, in pre-order."""
    for node in tree:
        lines.append(render_node_line(node) + "\n")
        if node.children:
            _render_level(node.children, lines)
