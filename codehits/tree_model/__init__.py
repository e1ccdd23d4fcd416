"""Result-tree model: construction, traversal, and row formatting.

Defines ``TreeNode`` and builds path-segment trees from search results.
"""

from __future__ import annotations

from .build import TreeRow, build_tree, iter_tree_rows
from .rendering import format_tree_lines, format_tree_row
from .types import TreeNode

__all__ = [
    "TreeNode",
    "TreeRow",
    "build_tree",
    "iter_tree_rows",
    "format_tree_lines",
    "format_tree_row",
]
