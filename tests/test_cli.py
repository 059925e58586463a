"""Tests for the Click command line."""

import json
import re
from pathlib import Path

from click.testing import CliRunner

from godep.cli import cli, query
from godep.errors import ToolError
from godep.models import DEFAULT_TIMEOUT

FIXTURES = Path(__file__).parent / "fixtures"
GRAPH_FILE = str(FIXTURES / "gomod_graph.txt")


def _invoke(*args, **kwargs):
    return CliRunner().invoke(cli, list(args), **kwargs)


class TestQueryCommand:
    def test_default_query(self):
        result = _invoke("graph", "query", "--input", GRAPH_FILE)
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "example.com/app"
        assert "  github.com/spf13/cobra" in lines
        assert "      golang.org/x/text (cycle -> golang.org/x/text)" in lines

    def test_dependents_with_start(self):
        result = _invoke(
            "graph", "query", "--input", GRAPH_FILE,
            "--start", "golang.org/x/tools", "--dependents",
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "golang.org/x/tools",
            "  golang.org/x/text",
            "    example.com/app",
            "    golang.org/x/tools (cycle -> golang.org/x/tools)",
        ]

    def test_contains_without_match_prints_nothing(self):
        result = _invoke("graph", "query", "--input", GRAPH_FILE, "--contains", "nope")
        assert result.exit_code == 0
        assert result.output == ""

    def test_path_cycles(self):
        result = _invoke("graph", "query", "--input", GRAPH_FILE, "--cycles", "path")
        assert result.exit_code == 0
        assert "(cycle -> github.com/spf13/pflag)" not in result.output
        assert "(cycle -> golang.org/x/text)" in result.output

    def test_versioned(self):
        result = _invoke("graph", "query", "--input", GRAPH_FILE, "--versioned")
        assert result.exit_code == 0
        assert "  github.com/spf13/cobra@v0.0.5" in result.output.splitlines()

    def test_stdin_input(self):
        result = _invoke("graph", "query", "--input", "-", input="a b\nb c\n")
        assert result.exit_code == 0
        assert result.output == "a\n  b\n    c\n"

    def test_tool_failure_exits_nonzero(self, monkeypatch):
        def failing(cmd, **kwargs):
            raise ToolError("failed to run `go mod graph`: go: not found", command=cmd)

        monkeypatch.setattr("godep.source.gomod.run_tool", failing)
        result = _invoke("graph", "query")
        assert result.exit_code == 1
        assert "go mod graph" in result.output

    def test_invalid_utf8_input(self, tmp_path):
        graph_file = tmp_path / "graph.txt"
        graph_file.write_bytes(b"a b\nb c\xff\n")
        result = _invoke("graph", "query", "--input", str(graph_file))
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_invalid_utf8_stdin(self):
        result = _invoke("graph", "query", "--input", "-", input=b"a b\n\xfe c\n")
        assert result.exit_code == 1
        assert "Error: <stdin> is not valid UTF-8" in result.output

    def test_deep_chain_with_contains(self, tmp_path):
        graph_file = tmp_path / "chain.txt"
        graph_file.write_text("".join(f"m{i:05d} m{i + 1:05d}\n" for i in range(1999)))
        result = _invoke("graph", "query", "--input", str(graph_file), "--contains", "m00000")
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 2000
        assert lines[-1] == "  " * 1999 + "m01999"

    def test_timeout_default(self):
        timeout = next(p for p in query.params if p.name == "timeout")
        assert timeout.default == DEFAULT_TIMEOUT


class TestDotCommand:
    def test_dot_to_stdout(self):
        result = _invoke("graph", "dot", "--input", GRAPH_FILE)
        assert result.exit_code == 0
        assert "digraph {" in result.output
        assert '"example.com/app" -> "golang.org/x/text"' in result.output

    def test_dot_to_file(self, tmp_path):
        out = tmp_path / "graph.dot"
        result = _invoke("graph", "dot", "--input", GRAPH_FILE, "-o", str(out))
        assert result.exit_code == 0
        assert out.read_text().count(" -> ") == 8

    def test_layout_failure(self):
        result = _invoke(
            "graph", "dot", "--input", GRAPH_FILE,
            "--format", "svg", "--command", "no-such-layout-command-xyz",
        )
        assert result.exit_code == 1
        assert "no-such-layout-command-xyz" in result.output


class TestHtmlCommands:
    def test_dependency_wheel(self):
        result = _invoke("graph", "dependency-wheel", "--input", GRAPH_FILE)
        assert result.exit_code == 0
        match = re.search(r"matrix: (\[\[.*?\]\])\n", result.output, re.S)
        rows = json.loads(match.group(1))
        assert len(rows) == 7
        assert rows[0] == [0, 1, 1, 1, 0, 0, 0]

    def test_itree(self, tmp_path):
        out = tmp_path / "tree.html"
        result = _invoke(
            "graph", "itree", "--input", GRAPH_FILE,
            "--contains", "golang.org/x/tools", "-o", str(out),
        )
        assert result.exit_code == 0
        page = out.read_text()
        assert "displayTree(treeData);" in page
        assert '"name": "golang.org/x/tools"' in page
        assert "github.com/spf13/cobra" not in page


def test_version():
    result = _invoke("--version")
    assert result.exit_code == 0
    assert "0.1.0" in result.output
