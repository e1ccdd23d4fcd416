"""Tests for project URL parsing and hosted source-line links."""

from __future__ import annotations

import unittest

from codehits.projects import (
    Project,
    parse_project_url,
    project_blob_url,
    remove_pattern,
    source_url,
)
from codehits.results import ResultRecord


class ProjectUrlBehaviorTests(unittest.TestCase):
    def test_parse_https_and_ssh_urls(self) -> None:
        https = parse_project_url("https://github.com/octo/widgets.git")
        self.assertEqual(https, Project(url="https://github.com/octo/widgets.git", company="github", owner="octo", name="widgets"))

        ssh = parse_project_url("git@github.com:octo-org/widgets")
        self.assertIsNotNone(ssh)
        self.assertEqual((ssh.owner, ssh.name), ("octo-org", "widgets"))

    def test_parse_rejects_unknown_hosts(self) -> None:
        self.assertIsNone(parse_project_url("https://example.com/octo/widgets"))
        self.assertIsNone(parse_project_url("not a url"))

    def test_parse_rejects_extra_path_components(self) -> None:
        self.assertIsNone(parse_project_url("https://github.com/octo/widgets/tree/main"))
        self.assertIsNone(parse_project_url("git@github.com:octo/widgets/extra.git"))
        trailing = parse_project_url("https://github.com/octo/widgets/")
        self.assertIsNotNone(trailing)
        self.assertEqual(trailing.name, "widgets")

    def test_remove_pattern_removes_first_occurrence_only(self) -> None:
        self.assertEqual(remove_pattern("a.git.git", ".git"), "a.git")
        self.assertEqual(remove_pattern("plain", ".git"), "plain")

    def test_project_blob_url_strips_git_suffix(self) -> None:
        project = Project(url="", company="github", owner="octo", name="widgets.git")
        self.assertEqual(project_blob_url(project), "https://github.com/octo/widgets/blob/master")

    def test_source_url_uses_first_segment_as_project(self) -> None:
        projects = [Project(url="", company="github", owner="octo", name="widgets")]
        record = ResultRecord(path="widgets/src/main.rs", line=42, content="fn main()", start=0, end=2)
        self.assertEqual(
            source_url(record, projects),
            "https://github.com/octo/widgets/blob/master/src/main.rs#L42",
        )

    def test_source_url_unknown_project_or_empty_path(self) -> None:
        projects = [Project(url="", company="github", owner="octo", name="widgets")]
        self.assertIsNone(source_url(ResultRecord(path="other/a.py", line=1, content="", start=0, end=0), projects))
        self.assertIsNone(source_url(ResultRecord(path="", line=1, content="", start=0, end=0), projects))


if __name__ == "__main__":
    unittest.main()
