"""Tests for ordered path filters.

Validates the pass-all empty set, OR substring matching after stripping the
leading slash, duplicate handling, and first-occurrence removal.
"""

from __future__ import annotations

import unittest

from codehits.filters import FilterSet, normalize_filter_entry
from codehits.results import ResultRecord


def _record(path: str) -> ResultRecord:
    return ResultRecord(path=path, line=1, content="x", start=0, end=1)


class FilterSetBehaviorTests(unittest.TestCase):
    def test_empty_filter_set_passes_every_record(self) -> None:
        records = [_record("a/b.go"), _record("x/y.go"), _record("")]
        filters = FilterSet()
        self.assertTrue(all(filters.matches(record) for record in records))
        self.assertEqual(filters.apply(records), records)

    def test_leading_slash_is_stripped_before_substring_match(self) -> None:
        filters = FilterSet()
        filters.add("/a/")
        self.assertTrue(filters.matches(_record("a/b.go")))
        self.assertFalse(filters.matches(_record("x/y.go")))

    def test_only_one_leading_slash_is_stripped(self) -> None:
        self.assertEqual(normalize_filter_entry("//a"), "/a")
        self.assertEqual(normalize_filter_entry("a/b"), "a/b")
        filters = FilterSet(["//a"])
        self.assertFalse(filters.matches(_record("a/b.go")))
        self.assertTrue(filters.matches(_record("x/a/b.go")))

    def test_matching_is_or_across_entries(self) -> None:
        filters = FilterSet(["/nomatch", "/src/main"])
        self.assertTrue(filters.matches(_record("proj/src/main.py")))
        self.assertFalse(filters.matches(_record("proj/docs/readme.md")))

    def test_intermediate_directory_entry_matches_nested_files(self) -> None:
        filters = FilterSet(["/proj/src"])
        kept = filters.apply([_record("proj/src/a.py"), _record("proj/lib/b.py"), _record("proj/src/pkg/c.py")])
        self.assertEqual([record.path for record in kept], ["proj/src/a.py", "proj/src/pkg/c.py"])

    def test_apply_preserves_original_order(self) -> None:
        records = [_record("b/1"), _record("a/2"), _record("b/3")]
        self.assertEqual(FilterSet(["/b"]).apply(records), [records[0], records[2]])

    def test_duplicates_are_kept_and_remove_drops_first_only(self) -> None:
        filters = FilterSet()
        filters.add("/a")
        filters.add("/b")
        filters.add("/a")
        self.assertEqual(filters.entries, ("/a", "/b", "/a"))
        self.assertTrue(filters.remove("/a"))
        self.assertEqual(filters.entries, ("/b", "/a"))
        self.assertTrue(filters.matches(_record("a/x")))

    def test_remove_absent_entry_is_noop(self) -> None:
        filters = FilterSet(["/a"])
        self.assertFalse(filters.remove("/missing"))
        self.assertEqual(filters.entries, ("/a",))

    def test_clear_is_idempotent(self) -> None:
        filters = FilterSet(["/a", "/b"])
        filters.clear()
        filters.clear()
        self.assertEqual(filters.entries, ())
        self.assertFalse(filters)


if __name__ == "__main__":
    unittest.main()
