"""Fixed-size pagination over ordered result sequences."""

from __future__ import annotations

from collections.abc import Sequence

from .results import ResultRecord

DEFAULT_PAGE_SIZE = 50

Page = tuple[ResultRecord, ...]


def paginate(records: Sequence[ResultRecord], page_size: int = DEFAULT_PAGE_SIZE) -> list[Page]:
    """Split ``records`` into contiguous pages of at most ``page_size``.

    Empty input yields no pages rather than one empty page.
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return [tuple(records[offset : offset + page_size]) for offset in range(0, len(records), page_size)]


def clamp_page_index(index: int, page_count: int) -> int:
    """Clamp ``index`` into the valid page range, or 0 when there are no pages."""
    if page_count <= 0:
        return 0
    return max(0, min(index, page_count - 1))
