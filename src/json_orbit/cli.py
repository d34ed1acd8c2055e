"""json-orbit CLI: lay out JSON documents from the command line.

Commands:
    layout      Print the node/edge layout of a JSON document as JSON
    viewport    Print the fit-view transform for a canvas size
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from json_orbit.layout.config import X_SPACING, Y_SPACING, LayoutConfig, NestedArrayMode
from json_orbit.mapper import JsonMapper
from json_orbit.result import GraphLayout
from json_orbit.viewport import fit_view

app = typer.Typer(
    name="json-orbit",
    help="Render JSON documents as node-and-edge diagrams.",
    no_args_is_help=True,
)

SourceArg = Annotated[str, typer.Argument(help="JSON file to read, or '-' for stdin")]


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _load_json(source: str) -> Any:
    """Read and parse the JSON document at ``source`` ('-' is stdin)."""
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as e:
        raise _fail(f"could not read '{source}': {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise _fail(f"invalid JSON in '{source}': line {e.lineno} column {e.colno}: {e.msg}") from e


def _compute(source: str, config: LayoutConfig) -> GraphLayout:
    value = _load_json(source)
    return JsonMapper(config=config, max_cache_size=0).layout(value)


def _emit(data: Any, output: str | None, indent: int | None) -> None:
    text = json.dumps(data, indent=indent, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Wrote layout to {output} ({len(text.encode()) / 1024:.1f}KB)", err=True)
    else:
        typer.echo(text)


@app.callback()
def _root(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log pipeline details to stderr")] = False,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


@app.command("layout")
def layout_cmd(
    source: SourceArg = "-",
    nested_arrays: Annotated[
        NestedArrayMode, typer.Option("--nested-arrays", help="How arrays inside arrays are drawn")
    ] = NestedArrayMode.LEAF,
    x_spacing: Annotated[float, typer.Option("--x-spacing", help="Horizontal distance between levels")] = X_SPACING,
    y_spacing: Annotated[float, typer.Option("--y-spacing", help="Vertical gap between sibling subtrees")] = Y_SPACING,
    react_flow: Annotated[bool, typer.Option("--react-flow", help="Emit React Flow nodes/edges")] = False,
    output: Annotated[str | None, typer.Option("--output", "-o", help="Write JSON to file")] = None,
    indent: Annotated[int | None, typer.Option("--indent", help="Indent output JSON")] = 2,
) -> None:
    """Lay out a JSON document and print its nodes and edges."""
    try:
        config = LayoutConfig(x_spacing=x_spacing, y_spacing=y_spacing, nested_arrays=nested_arrays)
    except ValueError as e:
        raise _fail(str(e)) from e

    graph = _compute(source, config)
    data = graph.to_react_flow() if react_flow else graph.to_dict()
    _emit(data, output, indent)


@app.command("viewport")
def viewport_cmd(
    source: SourceArg = "-",
    width: Annotated[float, typer.Option("--width", help="Canvas width in pixels")] = 1280,
    height: Annotated[float, typer.Option("--height", help="Canvas height in pixels")] = 800,
    padding: Annotated[float, typer.Option("--padding", help="Margin as a fraction of the bounds")] = 0.2,
) -> None:
    """Print the viewport that fits the whole diagram into a canvas."""
    graph = _compute(source, LayoutConfig())
    try:
        view = fit_view(graph, width, height, padding=padding)
    except ValueError as e:
        raise _fail(str(e)) from e
    typer.echo(json.dumps({"x": view.x, "y": view.y, "zoom": view.zoom}))


def main() -> None:
    """CLI entry point."""
    app()
