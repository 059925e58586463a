"""Read the module graph from the `go` tool or from a saved edge list."""

from __future__ import annotations

import sys
import threading
from pathlib import Path

from godep.errors import SourceDecodeError
from godep.models import GraphConfig
from godep.source.parser import parse_graph_lines
from godep.source.runner import run_tool


def _decode(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceDecodeError(f"{source} is not valid UTF-8: {e}") from e


def main_module(config: GraphConfig, cancel: threading.Event | None = None) -> str:
    """Return the main module path as reported by `go list -m`."""
    output = run_tool(
        ["go", "list", "-m"],
        cwd=config.work_dir,
        timeout=config.timeout,
        cancel=cancel,
    )
    return _decode(output, "`go list -m`").strip()


def read_graph_text(config: GraphConfig, cancel: threading.Event | None = None) -> str:
    """Return raw edge-list text, from ``config.input_path`` or `go mod graph`."""
    if config.input_path is not None:
        if str(config.input_path) == "-":
            return _decode(sys.stdin.buffer.read(), "<stdin>")
        return _decode(Path(config.input_path).read_bytes(), str(config.input_path))

    output = run_tool(
        ["go", "mod", "graph"],
        cwd=config.work_dir,
        timeout=config.timeout,
        cancel=cancel,
    )
    return _decode(output, "`go mod graph`")


def read_graph_pairs(
    config: GraphConfig, cancel: threading.Event | None = None,
) -> list[tuple[str, str]]:
    return parse_graph_lines(read_graph_text(config, cancel))
