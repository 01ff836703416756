#!/usr/bin/env python
"""Command line interface for pycontentful."""

import typer

from pycontentful.cli.commands import asset, entries, entry, render
from pycontentful.cli.utils import config

app = typer.Typer(help="Render Contentful rich text and browse delivery content")

app.command("render")(render.main)
app.command("entry")(entry.main)
app.command("entries")(entries.main)
app.command("asset")(asset.main)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Render Contentful rich text and browse delivery content."""
    config.setup_logging(verbose)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
