"""Configuration and logging helpers for the pycontentful CLI."""

import json
import logging
import os
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pycontentful import ContentfulService, DeliveryConfig
from pycontentful.exceptions import ConfigError

console = Console(stderr=True)

config_dir = os.path.expanduser("~/.config/pycontentful")
config_path = os.path.join(config_dir, "config.json")

# config.json key -> DeliveryConfig field
_FILE_KEYS = {
    "space_id": "space_id",
    "access_token": "access_token",
    "base_url": "base_url",
    "environment": "environment",
    "locale": "default_locale",
}


def setup_logging(verbose: bool = False) -> None:
    """Route logging through rich; --verbose enables library debug logs."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                markup=False,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    if verbose:
        logging.getLogger("pycontentful").setLevel(logging.DEBUG)


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from file."""
    path = path or config_path
    try:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def build_config(
    space_id: Optional[str] = None,
    access_token: Optional[str] = None,
    environment: Optional[str] = None,
) -> DeliveryConfig:
    """Options win over environment variables, which win over config.json."""
    stored = load_config()
    file_values = {
        field: stored[key] for key, field in _FILE_KEYS.items() if stored.get(key)
    }
    env_values = {
        field: value
        for field, value in (
            ("space_id", os.getenv("CONTENTFUL_SPACE_ID")),
            ("access_token", os.getenv("CONTENTFUL_ACCESS_TOKEN")),
            ("base_url", os.getenv("CONTENTFUL_BASE_URL")),
            ("environment", os.getenv("CONTENTFUL_ENVIRONMENT")),
            ("default_locale", os.getenv("CONTENTFUL_LOCALE")),
        )
        if value
    }
    values: Dict[str, Any] = {
        "space_id": "",
        "access_token": "",
        **file_values,
        **env_values,
    }
    for field, value in (
        ("space_id", space_id),
        ("access_token", access_token),
        ("environment", environment),
    ):
        if value:
            values[field] = value
    return DeliveryConfig(**values)


def get_service(
    space_id: Optional[str] = None,
    access_token: Optional[str] = None,
    environment: Optional[str] = None,
) -> ContentfulService:
    """Build a service from CLI options, or exit with a readable error."""
    try:
        config = build_config(space_id, access_token, environment)
    except ConfigError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        console.print(
            "Set CONTENTFUL_SPACE_ID and CONTENTFUL_ACCESS_TOKEN, pass "
            "--space/--token, or add them to " + config_path
        )
        raise typer.Exit(1)
    return ContentfulService(config)
