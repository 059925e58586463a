"""Dependency graph builder: forward and reverse adjacency from a normalized edge set."""

from __future__ import annotations

import logging
from typing import Iterable

from godep.analysis.graph_models import ModuleGraph, ModuleNode
from godep.errors import UnrecognizedModuleError
from godep.models import Dependency

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Build a module graph, cycles included."""

    def build(self, edges: Iterable[Dependency], modules: Iterable[str]) -> ModuleGraph:
        graph = ModuleGraph()

        # Step 1: one node per known module
        for module in modules:
            graph.nodes[module] = ModuleNode(module=module)

        # Step 2: wire both directions, failing on unknown endpoints
        for edge in edges:
            source = graph.nodes.get(edge.module)
            if source is None:
                raise UnrecognizedModuleError(edge.module, side="module")
            target = graph.nodes.get(edge.depends_on)
            if target is None:
                raise UnrecognizedModuleError(edge.depends_on, side="dependency")
            source.dependencies.append(target.module)
            target.dependents.append(source.module)

        logger.debug("built graph: %d modules, %d edges", len(graph), graph.edge_count)
        return graph
