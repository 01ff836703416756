"""
Content Delivery API wire models (entries, assets, collections).

Only the envelope is typed; entry ``fields`` stay as JSON because their shape
is defined per content type in the space.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, JsonValue

from ._base import CFModel


class Link(CFModel):
    type: str = "Link"
    linkType: Optional[str] = None
    id: str


class LinkRef(CFModel):
    sys: Link


class Sys(CFModel):
    id: str
    type: str
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    revision: Optional[int] = None
    locale: Optional[str] = None
    contentType: Optional[LinkRef] = None

    @property
    def content_type_id(self) -> Optional[str]:
        return self.contentType.sys.id if self.contentType else None


class Entry(CFModel):
    sys: Sys
    fields: Dict[str, JsonValue] = Field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.sys.id


class AssetFile(CFModel):
    url: Optional[str] = None
    fileName: Optional[str] = None
    contentType: Optional[str] = None
    details: Optional[Dict[str, Any]] = None


class AssetFields(CFModel):
    title: Optional[str] = None
    description: Optional[str] = None
    file: Optional[AssetFile] = None


class Asset(CFModel):
    sys: Sys
    fields: AssetFields = Field(default_factory=AssetFields)

    @property
    def id(self) -> str:
        return self.sys.id

    @property
    def url(self) -> Optional[str]:
        """Asset URL with a scheme (the API returns protocol-relative URLs)."""
        file = self.fields.file
        if not file or not file.url:
            return None
        if file.url.startswith("//"):
            return f"https:{file.url}"
        return file.url


class Includes(CFModel):
    model_config = ConfigDict(populate_by_name=True)

    entries: List[Entry] = Field(default_factory=list, alias="Entry")
    assets: List[Asset] = Field(default_factory=list, alias="Asset")


class EntryCollection(CFModel):
    sys: Dict[str, Any] = Field(default_factory=dict)
    total: int = 0
    skip: int = 0
    limit: int = 0
    items: List[Entry] = Field(default_factory=list)
    includes: Optional[Includes] = None
