"""Example: render the rich-text body of every entry of a content type."""

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install

from pycontentful import ContentfulService, DeliveryConfig
from pycontentful.exceptions import FieldError, FetchError, RenderError

install(show_locals=True)

console = Console()

logger = logging.getLogger("pycontentful.example")


def main():
    """Main function."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=True)],
    )

    parser = argparse.ArgumentParser(description="Render entries of a content type.")
    parser.add_argument("content_type", help="Content type ID, e.g. blogPost")
    parser.add_argument("--field", default="body", help="Rich-text field to render")
    parser.add_argument("--locale", default=None, help="Locale (default en-US)")
    args = parser.parse_args()

    # CONTENTFUL_SPACE_ID / CONTENTFUL_ACCESS_TOKEN must be set
    service = ContentfulService(DeliveryConfig.from_env())

    try:
        entries = service.fetch_entries(args.content_type, locale=args.locale)
    except FetchError as e:
        logger.error("Could not fetch entries: %s", e)
        return

    for entry in entries.items:
        console.rule(entry.id)
        try:
            console.print(service.render_field(entry, args.field), markup=False)
        except (FieldError, RenderError) as e:
            logger.warning("Skipping %s: %s", entry.id, e)


if __name__ == "__main__":
    main()
