"""Command modules for the pycontentful CLI."""

from pycontentful.cli.commands import asset, entries, entry, render

__all__ = ["asset", "entries", "entry", "render"]
