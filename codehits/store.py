"""Search-session coordinator for the result-indexing engine.

``SearchResultStore`` owns the raw results of the current search and
recomputes every derived view (full tree, filtered subset, filtered tree,
pages) explicitly on each state transition. Views handed out are snapshots:
tuples, frozen records, and trees rebuilt from scratch per recompute.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .filters import FilterSet
from .pagination import DEFAULT_PAGE_SIZE, Page, clamp_page_index, paginate
from .results import ResultRecord
from .tree_model import TreeNode, build_tree

logger = logging.getLogger(__name__)

FRESH_MESSAGE = "Search away!"
LOADING_MESSAGE = "Searching..."
EMPTY_RESULTS_MESSAGE = "Couldn't find anything... Sorry!"


class SessionState(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"


@dataclass
class SearchSession:
    """All state belonging to one submitted search."""

    pattern: str | None = None
    results: tuple[ResultRecord, ...] = ()
    filters: FilterSet = field(default_factory=FilterSet)
    full_tree: TreeNode = field(default_factory=TreeNode)
    filtered_results: tuple[ResultRecord, ...] = ()
    filtered_tree: TreeNode = field(default_factory=TreeNode)
    pages: tuple[Page, ...] = ()
    active_page_index: int = 0


class SearchResultStore:
    """Stateful coordinator wiring filters, tree indexing and pagination."""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self.page_size = page_size
        self._state = SessionState.IDLE
        self._fresh = True
        self._session = SearchSession()

    # transitions
    def begin_search(self, pattern: str) -> None:
        """Start a new search; prior session and derived views are discarded."""
        self._session = SearchSession(pattern=pattern)
        self._state = SessionState.LOADING
        self._fresh = False
        logger.debug("search started: %r", pattern)

    def submit_results(self, records: Iterable[ResultRecord]) -> None:
        """Install results for the current search and recompute every view.

        Callers must drop superseded results themselves; the store does not
        order overlapping searches.
        """
        pattern = self._session.pattern if self._state is SessionState.LOADING else None
        self._session = SearchSession(pattern=pattern, results=tuple(records))
        self._session.full_tree = build_tree(self._session.results)
        self._state = SessionState.READY
        self._fresh = False
        self._recompute_filtered()
        logger.debug(
            "results ready: %d records, %d pages",
            len(self._session.results),
            len(self._session.pages),
        )

    def add_filter(self, entry: str) -> None:
        self._session.filters.add(entry)
        self._filters_changed()

    def remove_filter(self, entry: str) -> None:
        if self._session.filters.remove(entry):
            self._filters_changed()

    def clear_filters(self) -> None:
        if self._session.filters:
            self._session.filters.clear()
            self._filters_changed()

    def set_active_page(self, index: int) -> int:
        """Select a page, clamping out-of-range indices; returns the index used."""
        clamped = clamp_page_index(index, len(self._session.pages))
        self._session.active_page_index = clamped
        return clamped

    def _filters_changed(self) -> None:
        if self._state is not SessionState.READY:
            return
        self._recompute_filtered()

    def _recompute_filtered(self) -> None:
        session = self._session
        session.filtered_results = tuple(session.filters.apply(session.results))
        session.filtered_tree = build_tree(session.filtered_results)
        session.pages = tuple(paginate(session.filtered_results, self.page_size))
        session.active_page_index = 0

    # views
    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def fresh(self) -> bool:
        """True until the first search is started or results are submitted."""
        return self._fresh

    @property
    def pattern(self) -> str | None:
        return self._session.pattern

    @property
    def results(self) -> tuple[ResultRecord, ...]:
        return self._session.results

    @property
    def full_tree(self) -> TreeNode:
        return self._session.full_tree

    @property
    def filtered_results(self) -> tuple[ResultRecord, ...]:
        return self._session.filtered_results

    @property
    def filtered_tree(self) -> TreeNode:
        return self._session.filtered_tree

    @property
    def filters(self) -> tuple[str, ...]:
        return self._session.filters.entries

    @property
    def pages(self) -> tuple[Page, ...]:
        return self._session.pages

    @property
    def page_count(self) -> int:
        return len(self._session.pages)

    @property
    def active_page_index(self) -> int:
        return self._session.active_page_index

    @property
    def active_page_records(self) -> Page:
        pages = self._session.pages
        index = self._session.active_page_index
        if 0 <= index < len(pages):
            return pages[index]
        return ()

    def status_message(self) -> str | None:
        """Return the empty-state message, or ``None`` when results are showing."""
        if self._fresh:
            return FRESH_MESSAGE
        if self._state is SessionState.LOADING:
            return LOADING_MESSAGE
        if not self._session.results:
            return EMPTY_RESULTS_MESSAGE
        return None
