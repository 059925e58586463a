"""Indented text rendering of a dependency tree."""

from __future__ import annotations

from godep.models import TreeNode

INDENT = "  "


def render_text(tree: TreeNode | None) -> str:
    """Render ``tree`` depth-first, two spaces per level, siblings sorted."""
    if tree is None:
        return ""
    lines: list[str] = []
    stack = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        prefix = INDENT * depth
        if node.cycle:
            lines.append(f"{prefix}{node.module} (cycle -> {node.cycle})")
        else:
            lines.append(f"{prefix}{node.module}")
        for child in reversed(node.sorted_children()):
            stack.append((child, depth + 1))
    return "\n".join(lines) + "\n"
