"""Ordered path filters applied to search results."""

from __future__ import annotations

from collections.abc import Iterable

from .results import ResultRecord


def normalize_filter_entry(entry: str) -> str:
    """Strip the single leading ``/`` tree rows prepend to segment paths."""
    return entry[1:] if entry.startswith("/") else entry


class FilterSet:
    """Insertion-ordered filter entries with OR substring matching.

    An empty set passes every record. Duplicates are kept and each counts
    toward the match.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def add(self, entry: str) -> None:
        self._entries.append(entry)

    def remove(self, entry: str) -> bool:
        """Remove the first exact occurrence of ``entry``; report whether one existed."""
        try:
            self._entries.remove(entry)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._entries.clear()

    def matches(self, record: ResultRecord) -> bool:
        if not self._entries:
            return True
        path = record.path
        return any(normalize_filter_entry(entry) in path for entry in self._entries)

    def apply(self, records: Iterable[ResultRecord]) -> list[ResultRecord]:
        """Return matching records in their original order."""
        if not self._entries:
            return list(records)
        return [record for record in records if self.matches(record)]
