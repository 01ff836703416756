"""Render command: turn a rich-text JSON file into HTML."""

import json
import sys
from enum import Enum

import typer
from rich.console import Console

from pycontentful.exceptions import RenderError
from pycontentful.rendering import ContentRenderer, RenderConfig

console = Console(stderr=True)


class UnknownPolicy(str, Enum):
    passthrough = "passthrough"
    skip = "skip"
    error = "error"


def _read_json(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def main(
    path: str = typer.Argument(..., help="JSON file with a node list or document ('-' for stdin)"),
    full_page: bool = typer.Option(False, "--full-page", help="Wrap output in a standalone HTML page"),
    title: str = typer.Option("", "--title", help="Page title used with --full-page"),
    unknown: UnknownPolicy = typer.Option(
        UnknownPolicy.passthrough, "--unknown", help="How to handle unknown node types"
    ),
):
    """Render a node list or rich-text document to an HTML fragment."""
    try:
        data = _read_json(path)
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] Could not read {path}: {e}")
        raise typer.Exit(1)

    renderer = ContentRenderer(RenderConfig(unknown_nodes=unknown.value))
    try:
        fragment = renderer.render_document(data)
    except RenderError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if full_page:
        fragment = renderer.render_full_page(title or _default_title(path), fragment)
    typer.echo(fragment)


def _default_title(path: str) -> str:
    return "stdin" if path == "-" else path
