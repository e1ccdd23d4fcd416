"""Search-result records and the backend JSON payload boundary.

``ResultRecord`` mirrors the backend search endpoint field-for-field.
Decoding helpers validate shape and skip malformed entries instead of
raising, so the engine only ever sees well-formed records.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

RESULT_FIELDS = ("path", "line", "content", "start", "end")


@dataclass(frozen=True)
class ResultRecord:
    """One matched line: location plus the half-open matched span."""

    path: str
    line: int  # 1-based
    content: str
    start: int
    end: int

    @property
    def segments(self) -> list[str]:
        """Return non-empty ``/``-delimited path components."""
        return path_segments(self.path)

    def to_payload(self) -> dict[str, object]:
        return {name: getattr(self, name) for name in RESULT_FIELDS}


def path_segments(path: str) -> list[str]:
    """Split ``path`` on ``/`` dropping empty components."""
    return [segment for segment in path.split("/") if segment]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def record_from_payload(obj: object) -> ResultRecord | None:
    """Build a record from one decoded JSON object, or ``None`` when malformed."""
    if not isinstance(obj, dict):
        return None
    path = obj.get("path")
    content = obj.get("content")
    line = obj.get("line")
    start = obj.get("start")
    end = obj.get("end")
    if not isinstance(path, str) or not isinstance(content, str):
        return None
    if not (_is_int(line) and _is_int(start) and _is_int(end)):
        return None
    if line < 1:
        return None
    if not 0 <= start <= end <= len(content):
        return None
    return ResultRecord(path=path, line=line, content=content, start=start, end=end)


def parse_results(payload: object) -> tuple[list[ResultRecord], int]:
    """Decode a JSON array of records.

    Returns ``(records, skipped)`` where ``skipped`` counts malformed entries.
    A non-list payload decodes to no records and counts as one skip.
    """
    if not isinstance(payload, list):
        return [], 1
    records: list[ResultRecord] = []
    skipped = 0
    for item in payload:
        record = record_from_payload(item)
        if record is None:
            skipped += 1
            continue
        records.append(record)
    if skipped:
        logger.debug("skipped %d malformed result entries", skipped)
    return records, skipped


def load_results_file(path: Path) -> tuple[list[ResultRecord], str | None]:
    """Load records from a JSON file, returning an error message on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return [], f"failed to read {path}: {exc}"
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        return [], f"invalid JSON in {path}: {exc}"
    if not isinstance(payload, list):
        return [], f"expected a JSON array of results in {path}"
    records, skipped = parse_results(payload)
    if skipped:
        logger.warning("skipped %d malformed result entries in %s", skipped, path)
    return records, None


def match_span(record: ResultRecord) -> tuple[str, str, str]:
    """Split ``record.content`` into ``(before, matched, after)``."""
    content = record.content
    return content[: record.start], content[record.start : record.end], content[record.end :]
