import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from topo._errors import GraphCycleError
from topo._graph import Graph, graph_from_mapping

from .config import ConfigError, get_config
from .edges import parse_edges

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

EdgesArgument = Annotated[
    list[str],
    typer.Argument(help="Edges as 'src:dst1,dst2'; a bare 'src' declares a node without edges"),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Topo CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _build_graph(edges: list[str]) -> Graph:
    try:
        config = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if config.project_root is not None:
        logger.debug("Using configuration from %s", config.project_root)

    try:
        successors = parse_edges(edges, delimiter=config.delimiter, separator=config.separator)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="EDGES") from e

    return graph_from_mapping(successors)


@app.command()
def sort(edges: EdgesArgument) -> None:
    """Print the nodes in topological order, one per line."""
    graph = _build_graph(edges)

    try:
        order = graph.sort()
    except GraphCycleError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    for node_id in order:
        out_console.print(node_id, markup=False, highlight=False, soft_wrap=True)


@app.command()
def show(edges: EdgesArgument) -> None:
    """Print each node with its successors."""
    graph = _build_graph(edges)
    out_console.print(str(graph), end="", markup=False, highlight=False, soft_wrap=True)
    err_console.print(f"[dim]Total: {len(graph)} nodes[/dim]")


def main() -> None:
    app()
