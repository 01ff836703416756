"""
High-level Contentful delivery service.

Public API:
  - ContentfulService.fetch_entry(entry_id, locale=None) -> Entry
  - ContentfulService.fetch_asset(asset_id, locale=None) -> Asset
  - ContentfulService.fetch_entries(content_type, locale=None) -> EntryCollection
  - ContentfulService.render_field(entry, field_name, options=None) -> str
  - ContentfulService.raw -> DeliveryClient (escape hatch)

Locale defaults to the config's default_locale ("en-US").
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .client import DeliveryClient
from .exceptions import FieldError, InvalidResponseError
from .models import Asset, DeliveryConfig, Entry, EntryCollection
from .rendering import RenderConfig, render_document

LOGGER = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


class ContentfulService:
    """Fetches entries and assets, and renders their rich-text fields."""

    def __init__(
        self, config: DeliveryConfig, session: Optional[requests.Session] = None
    ):
        self._config = config
        self._raw = DeliveryClient(config, session=session)

    @property
    def raw(self) -> DeliveryClient:
        return self._raw

    def _locale(self, locale: Optional[str]) -> str:
        return locale or self._config.default_locale

    @staticmethod
    def _validate(model: Type[_M], op: str, data: Any) -> _M:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            LOGGER.error("%s response validation failed: %s", op, e)
            raise InvalidResponseError(
                f"{op} response validation failed", payload=data
            ) from e

    def fetch_entry(self, entry_id: str, locale: Optional[str] = None) -> Entry:
        LOGGER.debug("Fetching entry %s", entry_id)
        data = self._raw.get(f"entries/{entry_id}", {"locale": self._locale(locale)})
        return self._validate(Entry, "entries.get", data)

    def fetch_asset(self, asset_id: str, locale: Optional[str] = None) -> Asset:
        LOGGER.debug("Fetching asset %s", asset_id)
        data = self._raw.get(f"assets/{asset_id}", {"locale": self._locale(locale)})
        return self._validate(Asset, "assets.get", data)

    def fetch_entries(
        self, content_type: str, locale: Optional[str] = None
    ) -> EntryCollection:
        LOGGER.debug("Fetching entries of content type %s", content_type)
        params: Dict[str, object] = {
            "content_type": content_type,
            "locale": self._locale(locale),
        }
        data = self._raw.get("entries", params)
        collection = self._validate(EntryCollection, "entries.list", data)
        LOGGER.info(
            "Fetched %d of %d %s entries",
            len(collection.items),
            collection.total,
            content_type,
        )
        return collection

    @staticmethod
    def render_field(
        entry: Entry, field_name: str, options: Optional[RenderConfig] = None
    ) -> str:
        """Render the rich-text field ``field_name`` of ``entry`` to HTML."""
        if field_name not in entry.fields:
            raise FieldError(f"Entry {entry.id} has no field {field_name!r}")
        value = entry.fields[field_name]
        if not (isinstance(value, dict) and value.get("nodeType") == "document"):
            raise FieldError(
                f"Field {field_name!r} of entry {entry.id} is not rich text"
            )
        return render_document(value, options)
