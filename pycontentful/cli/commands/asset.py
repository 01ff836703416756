"""Asset command: show an asset's title and file URL."""

from typing import Optional

import typer
from rich.console import Console

from pycontentful.cli.utils import config
from pycontentful.exceptions import PyContentfulError

console = Console()


def main(
    asset_id: str = typer.Argument(..., help="ID of the asset"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Locale (default en-US)"),
    space: Optional[str] = typer.Option(None, "--space", help="Space ID"),
    token: Optional[str] = typer.Option(None, "--token", help="Delivery API access token"),
    environment: Optional[str] = typer.Option(None, "--environment", help="Environment ID"),
):
    """Get details about a specific asset."""
    service = config.get_service(space, token, environment)

    try:
        asset = service.fetch_asset(asset_id, locale=locale)
    except PyContentfulError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    console.print("[bold]Asset Details:[/bold]")
    console.print(f"Title: [bold]{asset.fields.title or ''}[/bold]")
    console.print(f"Description: {asset.fields.description or ''}")
    console.print(f"URL: {asset.url or ''}")
    if asset.fields.file and asset.fields.file.contentType:
        console.print(f"Content type: {asset.fields.file.contentType}")
