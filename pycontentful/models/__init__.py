"""Public exports for Delivery API data models."""

from __future__ import annotations

from .config import DeliveryConfig
from .delivery import Asset, AssetFile, Entry, EntryCollection, Sys

__all__ = [
    "Asset",
    "AssetFile",
    "DeliveryConfig",
    "Entry",
    "EntryCollection",
    "Sys",
]
