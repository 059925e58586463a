"""Data models for the module dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from godep.models import Direction


@dataclass
class ModuleNode:
    module: str
    dependencies: list[str] = field(default_factory=list)  # modules this one depends on
    dependents: list[str] = field(default_factory=list)  # modules depending on this one


@dataclass
class ModuleGraph:
    nodes: dict[str, ModuleNode] = field(default_factory=dict)

    def __contains__(self, module: str) -> bool:
        return module in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, module: str) -> ModuleNode | None:
        return self.nodes.get(module)

    def neighbors(self, module: str, direction: Direction) -> list[str]:
        node = self.nodes.get(module)
        if node is None:
            return []
        if direction is Direction.DEPENDENTS:
            return list(node.dependents)
        return list(node.dependencies)

    @property
    def edge_count(self) -> int:
        return sum(len(n.dependencies) for n in self.nodes.values())
