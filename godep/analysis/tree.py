"""Flatten a module graph into a rooted tree and prune it to paths of interest."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from godep.analysis.graph_models import ModuleGraph
from godep.models import CycleMode, Direction, TreeNode

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


@dataclass
class TraversalState:
    """Everything one flatten call threads through its recursion."""
    graph: ModuleGraph
    direction: Direction
    mode: CycleMode = CycleMode.SHARED
    visited: set[str] = field(default_factory=set)
    expanded: int = 0


def flatten(
    graph: ModuleGraph,
    root: str,
    direction: Direction = Direction.DEPENDENCIES,
    mode: CycleMode = CycleMode.SHARED,
) -> TreeNode:
    """Expand ``graph`` depth-first from ``root`` into a tree.

    Children are visited in lexicographic order. A module that has already
    been visited is not expanded again: it becomes a leaf whose ``cycle`` is
    its own identifier. In ``SHARED`` mode "already visited" means anywhere
    earlier in this traversal, so shared dependencies reached through a
    second branch are marked as well. An unknown root gives a childless tree.
    """
    state = TraversalState(graph=graph, direction=direction, mode=mode)
    tree = TreeNode(module=root)
    children = _expand(state, root)
    if children is not None:
        tree.children = children
    logger.debug(
        "flattened %s of %s (%s cycles): %d modules expanded",
        direction.value, root, mode.value, state.expanded,
    )
    return tree


def _expand(state: TraversalState, module: str) -> dict[str, TreeNode] | None:
    """Return the children of ``module``, or None on a revisit or unknown module.

    The depth-first walk keeps its own stack so chain length is not bounded
    by the interpreter's recursion limit.
    """
    if not _enter(state, module):
        return None

    children: dict[str, TreeNode] = {}
    stack = [(module, children, iter(_sorted_neighbors(state, module)))]
    while stack:
        current, current_children, pending = stack[-1]
        neighbor = next(pending, None)
        if neighbor is None:
            stack.pop()
            if state.mode is CycleMode.PATH:
                state.visited.discard(current)
            continue

        child = TreeNode(module=neighbor)
        current_children[neighbor] = child
        if not _enter(state, neighbor):
            child.cycle = neighbor
            continue
        stack.append((neighbor, child.children, iter(_sorted_neighbors(state, neighbor))))
    return children


def _enter(state: TraversalState, module: str) -> bool:
    if module not in state.graph or module in state.visited:
        return False
    state.visited.add(module)
    state.expanded += 1
    return True


def _sorted_neighbors(state: TraversalState, module: str) -> list[str]:
    return sorted(state.graph.neighbors(module, state.direction))


def copy_tree(tree: TreeNode) -> TreeNode:
    """Return an independent copy of ``tree``."""
    root = TreeNode(module=tree.module, cycle=tree.cycle)
    stack = [(tree, root)]
    while stack:
        source, target = stack.pop()
        for name, child in source.children.items():
            copied = TreeNode(module=child.module, cycle=child.cycle)
            target.children[name] = copied
            stack.append((child, copied))
    return root


def filter_tree(tree: TreeNode, predicate: Predicate, matched: bool = False) -> TreeNode | None:
    """Prune ``tree`` to the paths that reach a module satisfying ``predicate``.

    Everything at and below the first match on a path is kept as is.
    Returns None when nothing in the tree matches.
    """
    if matched or predicate(tree.module):
        return copy_tree(tree)
    if not tree.children:
        return None

    # Each frame: unmatched node, its surviving children, children left to visit.
    stack = [(tree, {}, iter(tree.children.items()))]
    while stack:
        node, kept, pending = stack[-1]
        item = next(pending, None)
        if item is not None:
            name, child = item
            if predicate(child.module):
                kept[name] = copy_tree(child)
            elif child.children:
                stack.append((child, {}, iter(child.children.items())))
            continue

        stack.pop()
        result = TreeNode(module=node.module, cycle=node.cycle, children=kept) if kept else None
        if not stack:
            return result
        if result is not None:
            stack[-1][1][node.module] = result
    return None


def contains(module: str) -> Predicate:
    """Predicate matching exactly ``module``."""
    return lambda candidate: candidate == module
