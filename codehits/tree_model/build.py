"""Result-tree construction and traversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..results import ResultRecord, path_segments
from .types import TreeNode


def build_tree(records: Iterable[ResultRecord]) -> TreeNode:
    """Build a fresh path tree from ``records``.

    Records sharing a path share nodes; paths without segments are ignored.
    """
    root = TreeNode()
    for record in records:
        segments = path_segments(record.path)
        if not segments:
            continue
        node = root
        for segment in segments:
            node = node.child(segment)
        node.is_result = True
    return root


@dataclass(frozen=True)
class TreeRow:
    """One depth-first position in a result tree."""

    segment: str
    path: str  # "/"-joined from the root, with a leading "/"
    depth: int  # 0 for top-level segments
    node: TreeNode


def iter_tree_rows(root: TreeNode, parent: str = "", depth: int = 0) -> Iterator[TreeRow]:
    """Yield tree rows depth-first in child insertion order.

    ``path`` is the form the tree view hands to ``FilterSet.add``.
    """
    for segment, node in root.children.items():
        path = f"{parent}/{segment}"
        yield TreeRow(segment=segment, path=path, depth=depth, node=node)
        yield from iter_tree_rows(node, path, depth + 1)
