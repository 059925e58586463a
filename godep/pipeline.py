"""Graph pipeline orchestrator: read -> normalize -> build -> flatten -> filter -> render."""

from __future__ import annotations

import logging
import threading

from godep.analysis.dependency_graph import DependencyGraphBuilder
from godep.analysis.graph_models import ModuleGraph
from godep.analysis.normalize import normalize_edges
from godep.analysis.tree import contains, filter_tree, flatten
from godep.exporter import (
    build_matrix,
    render_dot,
    render_tree_page,
    render_wheel_page,
    run_layout,
)
from godep.models import GraphConfig, NormalizedEdges, QueryResult
from godep.source import main_module, read_graph_pairs

logger = logging.getLogger(__name__)


def load_edges(config: GraphConfig, cancel: threading.Event | None = None) -> NormalizedEdges:
    """Read the raw graph and normalize it according to ``config.versioned``."""
    pairs = read_graph_pairs(config, cancel)
    normalized = normalize_edges(pairs, versioned=config.versioned)
    logger.debug(
        "normalized %d raw edges into %d edges over %d modules",
        len(pairs), len(normalized.edges), len(normalized.modules),
    )
    return normalized


def load_graph(config: GraphConfig, cancel: threading.Event | None = None) -> tuple[NormalizedEdges, ModuleGraph]:
    normalized = load_edges(config, cancel)
    graph = DependencyGraphBuilder().build(normalized.edges, normalized.modules)
    return normalized, graph


def resolve_start(
    config: GraphConfig,
    normalized: NormalizedEdges,
    cancel: threading.Event | None = None,
) -> str:
    """Pick the module to start from.

    An explicit ``config.start`` wins. With a saved edge list the first module
    seen is used (the main module in `go mod graph` output); otherwise the
    `go` tool is asked for the main module.
    """
    if config.start:
        return config.start
    if config.input_path is not None:
        return normalized.ordered[0] if normalized.ordered else ""
    return main_module(config, cancel)


def run_query(config: GraphConfig, cancel: threading.Event | None = None) -> QueryResult:
    """Flatten the graph from the start module and apply the ``contains`` filter."""
    normalized, graph = load_graph(config, cancel)
    start = resolve_start(config, normalized, cancel)
    if start not in graph:
        logger.warning("start module %s is not in the graph", start)

    tree = flatten(graph, start, config.direction, config.cycle_mode)
    if config.contains:
        return QueryResult(start=start, tree=filter_tree(tree, contains(config.contains)))
    return QueryResult(start=start, tree=tree)


def run_dot(config: GraphConfig, cancel: threading.Event | None = None) -> bytes:
    """Render the whole graph as dot, or as ``config.dot_format`` via the layout command."""
    normalized = load_edges(config, cancel)
    root = resolve_start(config, normalized, cancel)
    source = render_dot(root, normalized.edges)
    if not config.dot_format:
        return source.encode("utf-8")
    return run_layout(
        source,
        config.dot_format,
        config.dot_command,
        timeout=config.timeout,
        cancel=cancel,
    )


def run_wheel(config: GraphConfig, cancel: threading.Event | None = None) -> str:
    normalized = load_edges(config, cancel)
    return render_wheel_page(build_matrix(normalized.ordered, normalized.edges))


def run_itree(config: GraphConfig, cancel: threading.Event | None = None) -> str:
    result = run_query(config, cancel)
    return render_tree_page(result.start, result.tree)
