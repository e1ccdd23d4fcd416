"""Path-tree node datatype shared by the indexer and its consumers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """One path segment position in the result tree.

    ``children`` maps the next path segment to its node. ``is_result`` is set
    when some record's full path ends here, so a node can be both a result
    and a directory (``a/b`` alongside ``a/b/c``).
    """

    children: dict[str, TreeNode] = field(default_factory=dict)
    is_result: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __contains__(self, segment: object) -> bool:
        return segment in self.children

    def __getitem__(self, segment: str) -> TreeNode:
        return self.children[segment]

    def __len__(self) -> int:
        return len(self.children)

    def child(self, segment: str) -> TreeNode:
        """Return child for ``segment``, creating it when missing."""
        node = self.children.get(segment)
        if node is None:
            node = TreeNode()
            self.children[segment] = node
        return node

    def to_dict(self) -> dict[str, dict]:
        """Return the plain nested-mapping form (segment -> mapping)."""
        return {segment: node.to_dict() for segment, node in self.children.items()}
