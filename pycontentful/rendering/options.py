"""
Render configuration for rich-text HTML output.

The config is passed unchanged through every recursive render call, so
node-specific behavior can be tuned here without touching the traversal.
Defaults reproduce the built-in tag mapping exactly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Literal, Mapping

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from .nodes import ContentNode

UnknownNodePolicy = Literal["passthrough", "skip", "error"]
UNKNOWN_NODE_POLICIES = ("passthrough", "skip", "error")

# (node, render_children) -> html
NodeHook = Callable[["ContentNode", Callable[[], str]], str]


@dataclass(frozen=True)
class RenderConfig:
    # What to do with a nodeType that has no built-in mapping:
    #   passthrough: render its children without a wrapping tag
    #   skip: drop the node and its children
    #   error: raise UnknownNodeTypeError
    unknown_nodes: UnknownNodePolicy = "passthrough"

    # Per-nodeType overrides, consulted before the built-in dispatch.
    node_renderers: Mapping[str, NodeHook] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if self.unknown_nodes not in UNKNOWN_NODE_POLICIES:
            raise ValueError(
                f"unknown_nodes must be one of {UNKNOWN_NODE_POLICIES}, "
                f"got {self.unknown_nodes!r}"
            )
        # Freeze caller-supplied dicts so a shared config cannot drift.
        if not isinstance(self.node_renderers, MappingProxyType):
            object.__setattr__(
                self, "node_renderers", MappingProxyType(dict(self.node_renderers))
            )

    def hook_for(self, node_type: Any) -> NodeHook | None:
        return self.node_renderers.get(node_type)


DEFAULT_CONFIG = RenderConfig()
