"""Exporter layer."""

from godep.exporter.dot import render_dot, run_layout
from godep.exporter.html import render_tree_page, render_wheel_page
from godep.exporter.json_tree import render_json, tree_to_dict
from godep.exporter.matrix import build_matrix
from godep.exporter.text import render_text

__all__ = [
    "build_matrix",
    "render_dot",
    "render_json",
    "render_text",
    "render_tree_page",
    "render_wheel_page",
    "run_layout",
    "tree_to_dict",
]
