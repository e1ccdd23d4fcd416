"""Public package surface for codehits.

Exports ``main`` for programmatic CLI invocation and ``SearchResultStore``
for embedding the result-indexing engine in another front end.
"""

from __future__ import annotations

from .store import SearchResultStore, SessionState


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["SearchResultStore", "SessionState", "main"]
