"""Command-line front door for codehits.

Loads a saved search-result payload, feeds it through the result-indexing
engine, and prints the selected page of matches.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import load_page_size, save_page_size
from .projects import Project, parse_project_url, source_url
from .results import ResultRecord, load_results_file
from .store import SearchResultStore
from .tree_model import format_tree_lines

NO_FILTER_MATCHES_MESSAGE = "No results match the filters."


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _project_url(value: str) -> Project:
    project = parse_project_url(value)
    if project is None:
        raise argparse.ArgumentTypeError(f"unsupported project URL: {value!r}")
    return project


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse saved code-search results by path filter and page."
    )
    parser.add_argument("results", help="JSON file holding the search result array.")
    parser.add_argument(
        "--filter",
        dest="filters",
        action="append",
        default=[],
        metavar="PATH",
        help="Keep results whose path contains PATH (repeatable; a leading '/' is ignored).",
    )
    parser.add_argument("--page", type=_positive_int, default=1, help="1-based page to print (clamped).")
    parser.add_argument(
        "--page-size",
        type=_positive_int,
        default=None,
        help="Results per page (default: configured value or 50).",
    )
    parser.add_argument(
        "--save-page-size",
        action="store_true",
        help="Persist --page-size as the default for later runs.",
    )
    parser.add_argument("--tree", action="store_true", help="Print the tree of all result paths.")
    parser.add_argument("--filtered-tree", action="store_true", help="Print the tree of filtered result paths.")
    parser.add_argument(
        "--project",
        dest="projects",
        type=_project_url,
        action="append",
        default=[],
        metavar="URL",
        help="Registered project clone URL used to print source links (repeatable).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def format_record(record: ResultRecord, projects: list[Project]) -> str:
    row = f"{record.path}:{record.line}: {record.content}"
    if projects:
        url = source_url(record, projects)
        if url is not None:
            row += f"\n    {url}"
    return row


def render_store(store: SearchResultStore, projects: list[Project], show_tree: bool, show_filtered_tree: bool) -> str:
    """Render the store's current views as plain text."""
    out: list[str] = []
    if show_tree:
        out.append("# tree")
        out.extend(format_tree_lines(store.full_tree))
    if show_filtered_tree and store.filters:
        out.append("# filtered tree")
        out.extend(format_tree_lines(store.filtered_tree))
    message = store.status_message()
    if message is not None:
        out.append(message)
        return "\n".join(out) + "\n"
    if store.page_count == 0:
        out.append(NO_FILTER_MATCHES_MESSAGE)
        page_label = "0/0"
    else:
        page_label = f"{store.active_page_index + 1}/{store.page_count}"
    for record in store.active_page_records:
        out.append(format_record(record, projects))
    summary = f"page {page_label}"
    summary += f" ({len(store.filtered_results)} of {len(store.results)} results)"
    if store.filters:
        summary += " filters: " + ", ".join(store.filters)
    out.append(summary)
    return "\n".join(out) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, load results, and print the selected page."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    records, error = load_results_file(Path(args.results))
    if error is not None:
        raise SystemExit(error)

    if args.save_page_size:
        if args.page_size is None:
            raise SystemExit("--save-page-size requires --page-size.")
        save_page_size(args.page_size)
    page_size = args.page_size if args.page_size is not None else load_page_size()
    store = SearchResultStore(page_size=page_size)
    store.submit_results(records)
    for entry in args.filters:
        store.add_filter(entry)
    store.set_active_page(args.page - 1)

    sys.stdout.write(render_store(store, args.projects, args.tree, args.filtered_tree))
    return 0


if __name__ == "__main__":
    main()
