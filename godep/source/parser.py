"""Parse `go mod graph` style output into raw (module, dependency) pairs."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def parse_graph_lines(text: str) -> list[tuple[str, str]]:
    """Split edge-list text into pairs.

    Each line must hold exactly two whitespace-separated tokens. Any other
    non-blank line is logged as a warning and skipped.
    """
    pairs: list[tuple[str, str]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            logger.warning("invalid input line %d: %r", lineno, line)
            continue
        pairs.append((parts[0], parts[1]))
    return pairs
