"""JSON form of a dependency tree for the interactive tree page.

Trees can be thousands of levels deep, deeper than the recursive encoders
in :mod:`json` allow, so both the dict form and the text form are built
with an explicit stack. The text matches ``json.dumps(..., indent=2)``.
"""

from __future__ import annotations

import json

from godep.models import TreeNode

INDENT = "  "


def tree_to_dict(tree: TreeNode) -> dict:
    """Convert ``tree`` to ``{name, cycle, children}``.

    Children are ordered by name; the key is left out for leaves.
    """
    root: dict = {"name": tree.module, "cycle": tree.cycle}
    stack = [(tree, root)]
    while stack:
        node, data = stack.pop()
        children = node.sorted_children()
        if not children:
            continue
        data["children"] = []
        for child in children:
            child_data: dict = {"name": child.module, "cycle": child.cycle}
            data["children"].append(child_data)
            stack.append((child, child_data))
    return root


def render_json(tree: TreeNode | None, name: str = "") -> str:
    """Serialize ``tree``; an absent tree becomes ``name`` with no children."""
    if tree is None:
        return json.dumps({"name": name, "cycle": "", "children": []}, indent=2)

    parts: list[str] = []
    # Items are literal text or (node, nesting level) still to be written.
    stack: list = [(tree, 0)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        node, level = item
        inner = "\n" + INDENT * (level + 1)
        closing = "\n" + INDENT * level + "}"
        parts.append(
            "{" + inner + '"name": ' + json.dumps(node.module)
            + "," + inner + '"cycle": ' + json.dumps(node.cycle)
        )
        children = node.sorted_children()
        if not children:
            parts.append(closing)
            continue
        parts.append("," + inner + '"children": [')
        stack.append(inner + "]" + closing)
        child_indent = "\n" + INDENT * (level + 2)
        for i in reversed(range(len(children))):
            stack.append((children[i], level + 2))
            stack.append(child_indent if i == 0 else "," + child_indent)
    return "".join(parts)
