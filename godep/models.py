"""Data models for the godep graph commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TIMEOUT = 60.0


class Direction(enum.Enum):
    DEPENDENCIES = "dependencies"
    DEPENDENTS = "dependents"


class CycleMode(enum.Enum):
    """How revisits are detected while flattening a graph into a tree.

    ``SHARED`` keeps one visited set for the whole traversal, so a module
    reached through two branches (a diamond) is marked like a cycle.
    ``PATH`` only tracks the current root-to-node path and marks true cycles.
    """
    SHARED = "shared"
    PATH = "path"


@dataclass(frozen=True)
class Dependency:
    """A single edge: ``module`` depends on ``depends_on``."""
    module: str
    depends_on: str


@dataclass
class NormalizedEdges:
    """Result from the edge normalizer."""
    edges: list[Dependency] = field(default_factory=list)
    modules: set[str] = field(default_factory=set)
    ordered: list[str] = field(default_factory=list)


@dataclass
class TreeNode:
    """One position in a rooted expansion of the graph."""
    module: str
    cycle: str = ""
    children: dict[str, TreeNode] = field(default_factory=dict)

    def sorted_children(self) -> list[TreeNode]:
        return [self.children[name] for name in sorted(self.children)]


@dataclass
class AdjacencyMatrix:
    """Module names plus a square 0/1 matrix indexed by their position."""
    modules: list[str] = field(default_factory=list)
    rows: list[list[int]] = field(default_factory=list)


@dataclass
class QueryResult:
    """Result from a tree query. ``tree`` is None when a filter matched nothing."""
    start: str
    tree: TreeNode | None = None


@dataclass
class GraphConfig:
    """Configuration for one graph command invocation."""
    versioned: bool = False
    start: str | None = None
    dependencies: bool = True
    contains: str | None = None
    cycle_mode: CycleMode = CycleMode.SHARED
    dot_format: str | None = None
    dot_command: str = "sfdp"
    work_dir: Path = field(default_factory=lambda: Path("."))
    input_path: Path | None = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def direction(self) -> Direction:
        return Direction.DEPENDENCIES if self.dependencies else Direction.DEPENDENTS
