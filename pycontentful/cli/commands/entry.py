"""Entry command: fetch an entry and render one of its rich-text fields."""

from typing import Optional

import typer
from rich.console import Console

from pycontentful.cli.utils import config
from pycontentful.exceptions import PyContentfulError
from pycontentful.rendering import render_page

console = Console(stderr=True)


def main(
    entry_id: str = typer.Argument(..., help="ID of the entry"),
    field: str = typer.Option(..., "--field", "-f", help="Rich-text field to render"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale (default en-US)"),
    full_page: bool = typer.Option(False, "--full-page", help="Wrap output in a standalone HTML page"),
    space: Optional[str] = typer.Option(None, "--space", help="Space ID"),
    token: Optional[str] = typer.Option(None, "--token", help="Delivery API access token"),
    environment: Optional[str] = typer.Option(None, "--environment", help="Environment ID"),
):
    """Render ENTRY_ID's rich-text FIELD to HTML."""
    service = config.get_service(space, token, environment)

    try:
        entry = service.fetch_entry(entry_id, locale=locale)
        fragment = service.render_field(entry, field)
    except PyContentfulError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if full_page:
        title = entry.fields.get("title")
        fragment = render_page(
            title if isinstance(title, str) else entry.id, fragment
        )
    typer.echo(fragment)
