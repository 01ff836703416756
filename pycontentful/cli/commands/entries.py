"""Entries command: list entries of a content type."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pycontentful.cli.utils import config
from pycontentful.exceptions import PyContentfulError

console = Console()


def main(
    content_type: str = typer.Argument(..., help="Content type ID"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale (default en-US)"),
    space: Optional[str] = typer.Option(None, "--space", help="Space ID"),
    token: Optional[str] = typer.Option(None, "--token", help="Delivery API access token"),
    environment: Optional[str] = typer.Option(None, "--environment", help="Environment ID"),
):
    """List entries of CONTENT_TYPE."""
    service = config.get_service(space, token, environment)

    try:
        collection = service.fetch_entries(content_type, locale=locale)
    except PyContentfulError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if not collection.items:
        console.print("No entries found")
        return

    table = Table("ID", "Content Type", "Updated")
    for item in collection.items:
        updated = item.sys.updatedAt.isoformat() if item.sys.updatedAt else ""
        table.add_row(item.id, item.sys.content_type_id or "", updated)
    console.print(table)
    console.print(f"{len(collection.items)} of {collection.total} entries")
