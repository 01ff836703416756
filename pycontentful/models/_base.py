from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CFModel(BaseModel):
    """
    Project-wide base model.

    Contentful adds keys to sys objects and node payloads (space, environment,
    data, ...) without notice; only the keys we read are typed and the rest
    are dropped.
    """

    model_config = ConfigDict(extra="ignore")


__all__ = ["CFModel"]
