"""Edge normalizer: version stripping, dedup and stable node ordering."""

from __future__ import annotations

from typing import Iterable

from godep.models import Dependency, NormalizedEdges

VERSION_SEPARATOR = "@"


def strip_version(module: str) -> str:
    """Drop the ``@version`` suffix. A leading separator is left alone."""
    idx = module.find(VERSION_SEPARATOR)
    if idx > 0:
        return module[:idx]
    return module


def normalize_edges(
    pairs: Iterable[tuple[str, str]],
    versioned: bool = False,
) -> NormalizedEdges:
    """Turn raw (module, dependency) pairs into a unique edge set.

    Unless ``versioned`` is set, identifiers are stripped of their version
    before anything is stored. ``ordered`` lists identifiers in the order
    they were first seen.
    """
    result = NormalizedEdges()
    seen_edges: set[Dependency] = set()
    seen_modules: dict[str, None] = {}

    for mod, dep in pairs:
        if not versioned:
            mod = strip_version(mod)
            dep = strip_version(dep)
        seen_modules.setdefault(mod)
        seen_modules.setdefault(dep)
        edge = Dependency(module=mod, depends_on=dep)
        if edge in seen_edges:
            continue
        seen_edges.add(edge)
        result.edges.append(edge)

    result.ordered = list(seen_modules)
    result.modules = set(seen_modules)
    return result
