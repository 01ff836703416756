"""Rendering support for Contentful rich text, transport-agnostic.

Contains:
- nodes: tagged node models and JSON parsing
- options: the RenderConfig bag threaded through every render call
- renderer: pure HTML renderer (fragment + page)
"""

from .nodes import ContentNode, Mark, parse_nodes
from .options import RenderConfig
from .renderer import (
    ContentRenderer,
    render,
    render_document,
    render_page,
    render_text,
)

__all__ = [
    "ContentNode",
    "ContentRenderer",
    "Mark",
    "RenderConfig",
    "parse_nodes",
    "render",
    "render_document",
    "render_page",
    "render_text",
]
