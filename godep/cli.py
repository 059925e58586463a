"""Click CLI: the `graph` command group with dot, query, dependency-wheel and itree."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from godep.errors import GodepError
from godep.exporter import render_text
from godep.models import DEFAULT_TIMEOUT, CycleMode, GraphConfig
from godep.pipeline import run_dot, run_itree, run_query, run_wheel

_CYCLE_CHOICES = [mode.value for mode in CycleMode]


_GRAPH_OPTIONS = [
    click.option("--versioned", is_flag=True, help="Track module versions instead of stripping them"),
    click.option("--dir", "work_dir", type=click.Path(exists=True, file_okay=False, path_type=Path),
                 default=".", help="Directory to run the go tool in"),
    click.option("--input", "input_path",
                 type=click.Path(exists=True, allow_dash=True, dir_okay=False, path_type=Path),
                 help="Read `go mod graph` output from a file ('-' for stdin) instead of running go"),
    click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True,
                 help="Seconds to allow each external command"),
]

_QUERY_OPTIONS = [
    click.option("--start", help="Module to start from (default: the main module)"),
    click.option("--dependencies/--dependents", default=True,
                 help="Trace dependencies (default) or dependents"),
    click.option("--contains", help="Only show paths that pass through this module"),
    click.option("--cycles", "cycle_mode", type=click.Choice(_CYCLE_CHOICES),
                 default=CycleMode.SHARED.value, show_default=True,
                 help="'shared' marks any module already expanded; 'path' marks only true cycles"),
]


def _apply(options, f):
    for option in reversed(options):
        f = option(f)
    return f


def graph_options(f):
    """Options shared by every graph subcommand."""
    return _apply(_GRAPH_OPTIONS, f)


def query_options(f):
    """Options selecting and filtering the tree to display."""
    return _apply(_QUERY_OPTIONS, f)


def _run(fn, config: GraphConfig):
    try:
        return fn(config)
    except GodepError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool):
    """godep: dependency management/query commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def graph():
    """Module dependency graph related commands."""


@graph.command()
@graph_options
@click.option("--format", "dot_format", help="Run the layout command to produce this output format")
@click.option("--command", "dot_command", default="sfdp", show_default=True,
              help="Command used to process the dot script")
@click.option("-o", "--output", type=click.File("wb"), default="-", help="Output file")
def dot(versioned, work_dir, input_path, timeout, dot_format, dot_command, output):
    """Output the dependency graph in dot format."""
    config = GraphConfig(
        versioned=versioned,
        work_dir=work_dir,
        input_path=input_path,
        timeout=timeout,
        dot_format=dot_format,
        dot_command=dot_command,
    )
    output.write(_run(run_dot, config))


@graph.command()
@graph_options
@query_options
def query(versioned, work_dir, input_path, timeout, start, dependencies, contains, cycle_mode):
    """Query the dependency graph."""
    config = GraphConfig(
        versioned=versioned,
        work_dir=work_dir,
        input_path=input_path,
        timeout=timeout,
        start=start,
        dependencies=dependencies,
        contains=contains,
        cycle_mode=CycleMode(cycle_mode),
    )
    result = _run(run_query, config)
    text = render_text(result.tree)
    if text:
        click.echo(text, nl=False)


@graph.command("dependency-wheel")
@graph_options
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-", help="Output file")
def dependency_wheel(versioned, work_dir, input_path, timeout, output):
    """Dependency wheel visualization."""
    config = GraphConfig(
        versioned=versioned,
        work_dir=work_dir,
        input_path=input_path,
        timeout=timeout,
    )
    output.write(_run(run_wheel, config))


@graph.command()
@graph_options
@query_options
@click.option("-o", "--output", type=click.File("w", encoding="utf-8"), default="-", help="Output file")
def itree(versioned, work_dir, input_path, timeout, start, dependencies, contains, cycle_mode, output):
    """Interactive tree visualization."""
    config = GraphConfig(
        versioned=versioned,
        work_dir=work_dir,
        input_path=input_path,
        timeout=timeout,
        start=start,
        dependencies=dependencies,
        contains=contains,
        cycle_mode=CycleMode(cycle_mode),
    )
    output.write(_run(run_itree, config))


if __name__ == "__main__":
    cli()
