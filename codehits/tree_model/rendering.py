"""Plain-text formatting for result-tree listings."""

from __future__ import annotations

from .build import iter_tree_rows
from .types import TreeNode

RESULT_MARKER = "*"


def format_tree_row(segment: str, depth: int, node: TreeNode) -> str:
    """Render one tree row with directory marker and result flag."""
    indent = "  " * depth
    if node.is_leaf:
        marker = "  "
        name = segment
    else:
        marker = "▾ "
        name = segment + "/"
    flag = f" {RESULT_MARKER}" if node.is_result else ""
    return f"{indent}{marker}{name}{flag}"


def format_tree_lines(root: TreeNode) -> list[str]:
    """Render the whole tree as indented rows, depth-first."""
    return [format_tree_row(row.segment, row.depth, row.node) for row in iter_tree_rows(root)]
