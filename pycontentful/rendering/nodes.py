"""
Rich-text node models.

A rich-text document is a JSON tree of objects tagged by ``nodeType``. Every
known tag maps to one model below; any other tag parses as ``UnknownNode`` so
the renderer can apply an explicit policy instead of guessing.

    ContainerNode   paragraph, heading-1..6, lists, tables
    HyperlinkNode   hyperlink (container + data.uri)
    TextNode        text leaf (value + marks)
    HrNode          hr leaf
    UnknownNode     anything else (document, embedded-*, blockquote, ...)
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Sequence, Union

from pydantic import (
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    ValidationError,
)

from ..exceptions import MalformedNodeError, RenderError
from ..models._base import CFModel

ContainerType = Literal[
    "paragraph",
    "heading-1",
    "heading-2",
    "heading-3",
    "heading-4",
    "heading-5",
    "heading-6",
    "list-item",
    "unordered-list",
    "ordered-list",
    "table",
    "table-row",
    "table-header-cell",
    "table-cell",
]

CONTAINER_TYPES = frozenset(ContainerType.__args__)  # type: ignore[attr-defined]

HYPERLINK = "hyperlink"
TEXT = "text"
HR = "hr"


class Mark(CFModel):
    """Inline styling annotation on a text leaf."""

    model_config = ConfigDict(frozen=True)

    type: str


class _Node(CFModel):
    model_config = ConfigDict(frozen=True)

    nodeType: str
    data: Dict[str, Any] = Field(default_factory=dict)


class ContainerNode(_Node):
    nodeType: ContainerType
    content: List["ContentNode"]


class HyperlinkData(CFModel):
    model_config = ConfigDict(frozen=True)

    uri: str


class HyperlinkNode(_Node):
    nodeType: Literal["hyperlink"]
    data: HyperlinkData  # type: ignore[assignment]
    content: List["ContentNode"]


class TextNode(_Node):
    nodeType: Literal["text"]
    value: str
    # Contentful always sends marks; hand-written trees often omit them.
    marks: List[Mark] = Field(default_factory=list)


class HrNode(_Node):
    # Leaf: anything besides nodeType is irrelevant, including stray content.
    model_config = ConfigDict(frozen=True, extra="ignore")

    nodeType: Literal["hr"]


class UnknownNode(_Node):
    model_config = ConfigDict(frozen=True, extra="allow")

    content: Optional[List["ContentNode"]] = None


def _node_tag(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        node_type = value.get("nodeType")
    else:
        node_type = getattr(value, "nodeType", None)
    if not isinstance(node_type, str):
        # No tag at all: not a node.
        return None
    if node_type in CONTAINER_TYPES:
        return "container"
    if node_type in (HYPERLINK, TEXT, HR):
        return node_type
    return "unknown"


ContentNode = Annotated[
    Union[
        Annotated[ContainerNode, Tag("container")],
        Annotated[HyperlinkNode, Tag(HYPERLINK)],
        Annotated[TextNode, Tag(TEXT)],
        Annotated[HrNode, Tag(HR)],
        Annotated[UnknownNode, Tag("unknown")],
    ],
    Discriminator(
        _node_tag,
        custom_error_type="missing_node_type",
        custom_error_message="Node must be an object with a string nodeType",
    ),
]

for _model in (ContainerNode, HyperlinkNode, TextNode, HrNode, UnknownNode):
    _model.model_rebuild()

_NODES = TypeAdapter(List[ContentNode])


def _describe(err: ValidationError) -> str:
    first = err.errors()[0] if err.errors() else {}
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", "invalid node")
    return f"Malformed node at {loc or '<root>'}: {msg}"


def parse_nodes(raw: Sequence[Any]) -> List[ContentNode]:
    """Parse a JSON node list (or already-built nodes) into node models.

    Raises MalformedNodeError when the input is not a list or any node does
    not have the shape its nodeType requires, and RenderError when the tree
    is nested deeper than validation allows.
    """
    if not isinstance(raw, (list, tuple)):
        raise MalformedNodeError(
            f"Expected a list of nodes, got {type(raw).__name__}"
        )
    try:
        return _NODES.validate_python(list(raw))
    except ValidationError as e:
        if any(err.get("type") == "recursion_loop" for err in e.errors()):
            raise RenderError("Document is nested too deeply to render") from None
        raise MalformedNodeError(_describe(e), e.errors()) from e


def node_children(node: ContentNode) -> List[ContentNode]:
    return list(getattr(node, "content", None) or [])


__all__ = [
    "CONTAINER_TYPES",
    "ContainerNode",
    "ContentNode",
    "HrNode",
    "HyperlinkData",
    "HyperlinkNode",
    "Mark",
    "TextNode",
    "UnknownNode",
    "node_children",
    "parse_nodes",
]
