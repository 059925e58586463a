"""Adjacency matrix for the dependency wheel."""

from __future__ import annotations

from typing import Iterable

from godep.models import AdjacencyMatrix, Dependency


def build_matrix(ordered: list[str], edges: Iterable[Dependency]) -> AdjacencyMatrix:
    """Row is the depending module, column the dependency, 1 iff an edge exists."""
    index = {name: i for i, name in enumerate(ordered)}
    rows = [[0] * len(ordered) for _ in ordered]
    for edge in edges:
        rows[index[edge.module]][index[edge.depends_on]] = 1
    return AdjacencyMatrix(modules=list(ordered), rows=rows)
