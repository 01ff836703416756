"""
Low-level HTTP client for the Contentful Content Delivery API.

Used internally by ContentfulService and exposed as its ``raw`` escape hatch.
Returns decoded JSON and maps every failure to a FetchError subclass.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import (
    AuthError,
    HttpStatusError,
    InvalidResponseError,
    NotFoundError,
    RateLimitedError,
    TransportError,
)
from .models.config import DeliveryConfig

LOGGER = logging.getLogger(__name__)


class DeliveryClient:
    """
    Minimal HTTP transport:
      - Bearer token auth header
      - String-only query params (booleans lowercased)
      - Non-2xx responses raised with status code and raw body
    """

    def __init__(
        self, config: DeliveryConfig, session: Optional[requests.Session] = None
    ):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {config.access_token}",
                "Accept": "application/json",
            }
        )
        LOGGER.debug("Initialized DeliveryClient for %s", config.space_url)

    @property
    def config(self) -> DeliveryConfig:
        return self._config

    @staticmethod
    def _normalize_params(params: Dict[str, object]) -> Dict[str, str]:
        out: Dict[str, str] = {}
        for k, v in params.items():
            if v is None:
                continue
            if isinstance(v, bool):
                out[k] = "true" if v else "false"
            else:
                out[k] = str(v)
        return out

    def _build_url(self, path: str) -> str:
        return f"{self._config.space_url}/{path.lstrip('/')}"

    def get(self, path: str, params: Optional[Dict[str, object]] = None) -> Any:
        url = self._build_url(path)
        query = self._normalize_params(params or {})
        LOGGER.info("GET %s", url)
        try:
            resp = self._session.get(url, params=query, timeout=self._config.timeout)
        except requests.RequestException as e:
            LOGGER.error("GET %s failed: %s", url, e)
            raise TransportError(f"Request to {url} failed: {e}") from e

        code = getattr(resp, "status_code", 0)
        LOGGER.debug("GET %s returned status %d", url, code)
        if not 200 <= code < 300:
            self._raise_for_status(url, resp)
        try:
            return resp.json()
        except ValueError:
            LOGGER.error("Failed to parse JSON response from %s", url)
            raise InvalidResponseError(
                "Invalid JSON response", payload=getattr(resp, "text", None)
            )

    @staticmethod
    def _raise_for_status(url: str, resp) -> None:
        code = resp.status_code
        try:
            body = resp.json()
        except ValueError:
            body = getattr(resp, "text", None)
        if code in (401, 403):
            LOGGER.error("GET %s failed with auth error: %d", url, code)
            raise AuthError(f"HTTP {code}: unauthorized", code, body)
        if code == 404:
            LOGGER.warning("GET %s: resource not found", url)
            raise NotFoundError(f"HTTP {code}: not found", code, body)
        if code == 429:
            retry_after = None
            headers = getattr(resp, "headers", None) or {}
            hdr = headers.get("X-Contentful-RateLimit-Reset") or headers.get(
                "Retry-After"
            )
            if hdr:
                try:
                    retry_after = float(hdr)
                except ValueError:
                    retry_after = None
            LOGGER.warning("GET %s was rate-limited. Retry after: %s", url, retry_after)
            raise RateLimitedError(
                "HTTP 429: rate limited", code, body, retry_after=retry_after
            )
        LOGGER.error("GET %s failed with code %d", url, code)
        raise HttpStatusError(f"HTTP {code}", code, body)
