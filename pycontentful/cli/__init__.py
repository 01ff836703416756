"""Command line interface for pycontentful."""
