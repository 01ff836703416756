from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..exceptions import ConfigError

DEFAULT_BASE_URL = "https://cdn.contentful.com"
DEFAULT_LOCALE = "en-US"


@dataclass(frozen=True)
class DeliveryConfig:
    """Connection settings for the Content Delivery API."""

    space_id: str
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    # None targets the space's master environment via the legacy path.
    environment: Optional[str] = None
    default_locale: str = DEFAULT_LOCALE
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.space_id:
            raise ConfigError("space_id is required")
        if not self.access_token:
            raise ConfigError("access_token is required")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides
    ) -> "DeliveryConfig":
        """Build a config from CONTENTFUL_* variables; explicit overrides win."""
        env = os.environ if environ is None else environ
        values = {
            "space_id": env.get("CONTENTFUL_SPACE_ID", ""),
            "access_token": env.get("CONTENTFUL_ACCESS_TOKEN", ""),
            "base_url": env.get("CONTENTFUL_BASE_URL") or DEFAULT_BASE_URL,
            "environment": env.get("CONTENTFUL_ENVIRONMENT") or None,
            "default_locale": env.get("CONTENTFUL_LOCALE") or DEFAULT_LOCALE,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def space_url(self) -> str:
        url = f"{self.base_url.rstrip('/')}/spaces/{self.space_id}"
        if self.environment:
            url = f"{url}/environments/{self.environment}"
        return url
