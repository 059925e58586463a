"""Self-contained HTML pages: dependency wheel and interactive tree."""

from __future__ import annotations

import html
import json
from pathlib import Path
from string import Template

from godep.models import AdjacencyMatrix, TreeNode
from godep.exporter.json_tree import render_json

STATIC_DIR = Path(__file__).parent / "static"

_WHEEL_PAGE = Template("""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>DependencyWheel for $name</title>
    <script src="https://d3js.org/d3.v5.min.js"></script>
  </head>
  <body>
  <script>
$js
  </script>
  <h2>DependencyWheel for $name</h2>
  <div id="chart_placeholder"></div>
  <script>
var data = {
  packageNames: $modules,
  matrix: $matrix
};

var chart = d3.chart.dependencyWheel();
d3.select('#chart_placeholder')
  .datum(data)
  .call(chart);
  </script>
  </body>
</html>
""")

_TREE_PAGE = Template("""<!DOCTYPE html>
<meta charset="utf-8">
<title>DependencyTree for $name</title>
<style type="text/css">
.node {
  cursor: pointer;
}

.overlay {
  background-color: #EEE;
}

.node circle {
  fill: #fff;
  stroke: steelblue;
  stroke-width: 1.5px;
}

.node.cycle circle {
  stroke: red;
}

.node text {
  font-size: 10px;
  font-family: sans-serif;
}

.link {
  fill: none;
  stroke: #ccc;
  stroke-width: 1.5px;
}
</style>
<script src="https://d3js.org/d3.v3.min.js"></script>
<body>
  <div id="tree-container"></div>
<script>
$js
let treeData = $tree;
displayTree(treeData);
</script>
</body>
</html>
""")


def _script(name: str) -> str:
    return (STATIC_DIR / name).read_text(encoding="utf-8")


def _embed(value) -> str:
    # JSON is valid JavaScript; only a closing script tag can break out.
    return json.dumps(value).replace("</", "<\\/")


def render_wheel_page(matrix: AdjacencyMatrix) -> str:
    name = matrix.modules[0] if matrix.modules else ""
    return _WHEEL_PAGE.substitute(
        name=html.escape(name),
        js=_script("dependency_wheel.js"),
        modules=_embed(matrix.modules),
        matrix=_embed(matrix.rows),
    )


def render_tree_page(name: str, tree: TreeNode | None) -> str:
    return _TREE_PAGE.substitute(
        name=html.escape(name),
        js=_script("tree.js"),
        tree=render_json(tree, name).replace("</", "<\\/"),
    )
