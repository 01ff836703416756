"""
Pure renderer for Contentful rich text.

Converts a list of rich-text nodes into a flat HTML fragment. No I/O, no
escaping: text values and link URIs are interpolated as-is.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from tinyhtml import h, html, raw

from ..exceptions import (
    MalformedNodeError,
    RenderError,
    UnknownMarkError,
    UnknownNodeTypeError,
)
from .nodes import (
    ContainerNode,
    ContentNode,
    HrNode,
    HyperlinkNode,
    Mark,
    TextNode,
    UnknownNode,
    node_children,
    parse_nodes,
)
from .options import DEFAULT_CONFIG, RenderConfig

LOGGER = logging.getLogger(__name__)

BLOCK_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "paragraph": "p",
        "heading-1": "h1",
        "heading-2": "h2",
        "heading-3": "h3",
        "heading-4": "h4",
        "heading-5": "h5",
        "heading-6": "h6",
        "list-item": "li",
        "unordered-list": "ul",
        "ordered-list": "ol",
        "table": "table",
        "table-row": "tr",
        "table-header-cell": "th",
        "table-cell": "td",
    }
)

MARK_TAGS: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "bold": ("<strong>", "</strong>"),
        "italic": ("<em>", "</em>"),
    }
)

HR_TAG = "<hr />"

MarkLike = Union[Mark, Mapping[str, Any], str]


def _mark_type(mark: MarkLike) -> Optional[str]:
    if isinstance(mark, Mark):
        return mark.type
    if isinstance(mark, str):
        return mark
    if isinstance(mark, Mapping):
        return mark.get("type")
    return None


def render_text(value: str, marks: Sequence[MarkLike] = ()) -> str:
    """Wrap ``value`` in the tags of each mark, first mark innermost."""
    out = value
    for mark in marks:
        mark_type = _mark_type(mark)
        try:
            open_tag, close_tag = MARK_TAGS[mark_type]  # type: ignore[index]
        except (KeyError, TypeError):
            raise UnknownMarkError(mark_type) from None
        out = f"{open_tag}{out}{close_tag}"
    return out


def _render_unknown(node: UnknownNode, config: RenderConfig) -> str:
    policy = config.unknown_nodes
    if policy == "error":
        raise UnknownNodeTypeError(node.nodeType)
    if policy == "skip":
        LOGGER.debug("Skipping unknown node type %r", node.nodeType)
        return ""
    LOGGER.debug("Passing through children of unknown node type %r", node.nodeType)
    return _render_nodes(node_children(node), config)


def _render_node(node: ContentNode, config: RenderConfig) -> str:
    hook = config.hook_for(node.nodeType)
    if hook is not None:
        return hook(node, lambda: _render_nodes(node_children(node), config))

    if isinstance(node, ContainerNode):
        tag = BLOCK_TAGS[node.nodeType]
        return f"<{tag}>{_render_nodes(node.content, config)}</{tag}>"
    if isinstance(node, HyperlinkNode):
        inner = _render_nodes(node.content, config)
        return f'<a href="{node.data.uri}">{inner}</a>'
    if isinstance(node, TextNode):
        return render_text(node.value, node.marks)
    if isinstance(node, HrNode):
        return HR_TAG
    if isinstance(node, UnknownNode):
        return _render_unknown(node, config)
    raise MalformedNodeError(f"Not a content node: {type(node).__name__}")


def _render_nodes(nodes: Sequence[ContentNode], config: RenderConfig) -> str:
    return "".join(_render_node(n, config) for n in nodes)


def _resolve_config(options: Optional[RenderConfig]) -> RenderConfig:
    if options is None:
        return DEFAULT_CONFIG
    if not isinstance(options, RenderConfig):
        raise TypeError(
            f"options must be a RenderConfig or None, got {type(options).__name__}"
        )
    return options


def render(nodes: Sequence[Any], options: Optional[RenderConfig] = None) -> str:
    """Render a list of rich-text nodes to an HTML fragment.

    ``nodes`` may hold raw JSON objects or parsed node models. Any error
    aborts the whole call; there is no partial output.
    """
    config = _resolve_config(options)
    try:
        parsed = parse_nodes(nodes)
        return _render_nodes(parsed, config)
    except RecursionError:
        raise RenderError("Document is nested too deeply to render") from None


def render_document(
    document: Union[Mapping[str, Any], Sequence[Any]],
    options: Optional[RenderConfig] = None,
) -> str:
    """Render a rich-text field value (``{"nodeType": "document", ...}``).

    A bare node list is accepted too and rendered as-is.
    """
    if isinstance(document, Mapping):
        if "content" not in document:
            raise MalformedNodeError("Rich-text document has no content")
        return render(document["content"], options)
    return render(document, options)


def render_page(title: str, html_fragment: str) -> str:
    """Wrap an HTML fragment in a minimal standalone page."""
    return html(lang="en")(
        h("head")(
            h("meta", charset="utf-8"),
            h("title")(title),
        ),
        h("body")(h("div", **{"class": "rich-text"})(raw(html_fragment))),
    ).render()


class ContentRenderer:
    """Class-based interface for rich-text rendering."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = _resolve_config(config)

    def render(self, nodes: Sequence[Any]) -> str:
        """Render a node list to an HTML fragment string."""
        return render(nodes, self.config)

    def render_document(self, document: Union[Mapping[str, Any], List[Any]]) -> str:
        return render_document(document, self.config)

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page."""
        return render_page(title, html_fragment)
