"""Shared helpers for the pycontentful CLI."""
