"""Contentful delivery client and rich-text HTML renderer."""

from pycontentful.client import DeliveryClient
from pycontentful.models import DeliveryConfig
from pycontentful.rendering import (
    ContentRenderer,
    RenderConfig,
    render,
    render_document,
    render_page,
    render_text,
)
from pycontentful.service import ContentfulService

__all__ = [
    "ContentRenderer",
    "ContentfulService",
    "DeliveryClient",
    "DeliveryConfig",
    "RenderConfig",
    "render",
    "render_document",
    "render_page",
    "render_text",
]
