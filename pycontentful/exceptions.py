"""Library exceptions."""

from __future__ import annotations

from typing import Any, List, Optional


class PyContentfulError(Exception):
    """Contentful generic exception."""


class ConfigError(PyContentfulError):
    """Missing or invalid configuration."""


class FieldError(PyContentfulError):
    """Entry field is missing or does not hold rich text."""


# ------------------------------- Rendering -----------------------------------


class RenderError(PyContentfulError):
    """Rendering aborted."""


class UnknownMarkError(RenderError):
    """Text node carries a mark type with no tag mapping."""

    def __init__(self, mark_type: Optional[str]):
        super().__init__(f"Unknown mark type: {mark_type!r}")
        self.mark_type = mark_type


class UnknownNodeTypeError(RenderError):
    """Node type has no renderer (raised only when unknown nodes are errors)."""

    def __init__(self, node_type: str):
        super().__init__(f"Unknown node type: {node_type!r}")
        self.node_type = node_type


class MalformedNodeError(RenderError):
    """Node shape does not match its nodeType."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


# -------------------------------- Fetching -----------------------------------


class FetchError(PyContentfulError):
    """Base Delivery API error."""


class TransportError(FetchError):
    """Request never produced an HTTP response."""


class HttpStatusError(FetchError):
    """Non-2xx HTTP response."""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthError(HttpStatusError):
    """Access token rejected (401/403)."""


class NotFoundError(HttpStatusError):
    """Resource does not exist (404)."""


class RateLimitedError(HttpStatusError):
    """429 Too Many Requests."""

    def __init__(
        self,
        message: str,
        status_code: int = 429,
        body: Any = None,
        retry_after: Optional[float] = None,
    ):
        super().__init__(message, status_code, body)
        self.retry_after = retry_after


class InvalidResponseError(FetchError):
    """Response body could not be parsed or validated."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload
