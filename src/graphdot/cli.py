"""CLI interface for graphdot using Typer framework."""

import logging
import sys
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from graphdot import __description__, __version__
from graphdot.config import LogLevel, load_config
from graphdot.edgelist import EdgeListGraph
from graphdot.escape import escape_id
from graphdot.render import render as render_graph
from graphdot.types import RankDir

app = typer.Typer(
    name="graphdot",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

# Status output goes to stderr so stdout carries only the DOT document.
console = Console(stderr=True)

_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def _setup_logging(level: LogLevel | str) -> None:
    """Route library logging through rich at the configured level."""
    logging.basicConfig(
        level=_LOG_LEVELS[LogLevel(level)],
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"graphdot version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """graphdot - render in-memory graphs as Graphviz DOT documents."""


@app.command()
def render(
    input_file: Annotated[
        Path,
        typer.Argument(help="Edge-list JSON document describing the graph")
    ],
    out: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    rankdir: Annotated[
        Optional[RankDir],
        typer.Option("--rankdir", "-r", help="Layout direction: TB, LR, BT, RL")
    ] = None,
    no_labels: Annotated[
        bool,
        typer.Option("--no-labels", help="Omit node and edge labels")
    ] = False,
    fontname: Annotated[
        Optional[str],
        typer.Option("--fontname", help="Font used for the graph, nodes and edges")
    ] = None,
    dark: Annotated[
        bool,
        typer.Option("--dark", help="Use white on black colors")
    ] = False,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .graphdot.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Render an edge-list JSON document as a DOT graph."""
    try:
        graphdot_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _setup_logging(LogLevel.DEBUG if verbose else graphdot_config.logging.level)

    overrides = {}
    if no_labels:
        overrides.update(no_node_labels=True, no_edge_labels=True)
    if fontname:
        overrides["fontname"] = fontname
    if dark:
        overrides["dark_theme"] = True
    options = graphdot_config.render.model_copy(update=overrides)

    try:
        graph = EdgeListGraph.from_json_file(input_file)
        if rankdir is not None:
            graph.rankdir = rankdir

        if out:
            output_file = out.resolve()
            with open(output_file, "w", encoding="utf-8") as f:
                render_graph(graph, f, options)
            console.print(f"[green]Graph written:[/green] {output_file}")
        else:
            render_graph(graph, sys.stdout, options)

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def escape(
    texts: Annotated[
        List[str],
        typer.Argument(help="Identifiers to escape")
    ],
) -> None:
    """Print each argument as a DOT identifier, quoted where needed."""
    for text in texts:
        typer.echo(escape_id(text))


if __name__ == "__main__":
    app()
