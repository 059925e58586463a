"""Graph source layer."""

from godep.source.gomod import main_module, read_graph_pairs, read_graph_text
from godep.source.parser import parse_graph_lines
from godep.source.runner import run_tool

__all__ = [
    "main_module",
    "parse_graph_lines",
    "read_graph_pairs",
    "read_graph_text",
    "run_tool",
]
