"""Registered-project metadata and hosted source-viewer URLs.

Result paths start with the project name (``<project>/<path in repo>``),
which is how a record is mapped back to the repository it came from.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .results import ResultRecord, path_segments

_HTTPS_PROJECT_RE = re.compile(r"https?://(?P<company>github)\.com/(?P<owner>[\w.-]+)/(?P<name>[\w.-]+?)(?:\.git)?/?$")
_SSH_PROJECT_RE = re.compile(r"git@(?P<company>github)\.com:(?P<owner>[\w.-]+)/(?P<name>[\w.-]+?)(?:\.git)?$")

DEFAULT_BRANCH = "master"


@dataclass(frozen=True)
class Project:
    url: str
    company: str
    owner: str
    name: str


def parse_project_url(url: str) -> Project | None:
    """Parse an https or ssh GitHub clone URL into a ``Project``."""
    text = url.strip()
    for pattern in (_HTTPS_PROJECT_RE, _SSH_PROJECT_RE):
        match = pattern.match(text)
        if match is None:
            continue
        return Project(
            url=text,
            company=match.group("company"),
            owner=match.group("owner"),
            name=match.group("name"),
        )
    return None


def remove_pattern(text: str, pattern: str) -> str:
    """Return ``text`` with the first occurrence of ``pattern`` removed."""
    index = text.find(pattern)
    if index < 0 or not pattern:
        return text
    return text[:index] + text[index + len(pattern) :]


def project_blob_url(project: Project, branch: str = DEFAULT_BRANCH) -> str:
    name = remove_pattern(project.name, ".git")
    return f"https://{project.company}.com/{project.owner}/{name}/blob/{branch}"


def source_url(record: ResultRecord, projects: Iterable[Project]) -> str | None:
    """Return the hosted URL for ``record``'s line, or ``None`` for unknown projects."""
    segments = path_segments(record.path)
    if not segments:
        return None
    project_name = segments[0]
    project = next((item for item in projects if item.name == project_name), None)
    if project is None:
        return None
    rest = "/".join(segments[1:])
    return f"{project_blob_url(project)}/{rest}#L{record.line}"
