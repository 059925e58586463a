"""Graphviz dot rendering, optionally piped through a layout command."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from typing import Iterable

from godep.models import DEFAULT_TIMEOUT, Dependency
from godep.source.runner import run_tool

logger = logging.getLogger(__name__)

ROOT_FILL_COLOR = "#E94762"


def _quote(name: str) -> str:
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_dot(root: str, edges: Iterable[Dependency]) -> str:
    """Emit a digraph with one statement per edge and the root highlighted."""
    lines = [
        "",
        "digraph {",
        "\tgraph [overlap=false, size=14];",
        f"\troot={_quote(root)};",
        '\tnode [  shape = plaintext, fontname = "Helvetica", fontsize=24];',
        f'\t{_quote(root)} [style = filled, fillcolor = "{ROOT_FILL_COLOR}"];',
    ]
    for edge in edges:
        lines.append(f"{_quote(edge.module)} -> {_quote(edge.depends_on)}")
    lines.append("}")
    return "\n".join(lines) + "\n"


def run_layout(
    dot_source: str,
    fmt: str,
    command: str = "sfdp",
    *,
    timeout: float | None = DEFAULT_TIMEOUT,
    cancel: threading.Event | None = None,
) -> bytes:
    """Run ``command -T<fmt>`` over ``dot_source`` and return its output."""
    fd, path = tempfile.mkstemp(prefix="dot-", suffix=".dot")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(dot_source)
        logger.debug("wrote dot source to %s", path)
        return run_tool([command, f"-T{fmt}", path], timeout=timeout, cancel=cancel)
    finally:
        os.remove(path)
