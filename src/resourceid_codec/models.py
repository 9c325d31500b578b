"""Shared data models used by the resource identifier codec."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResourceId(BaseModel):
    """Two-part key identifying a file or object within a storage backend."""

    model_config = ConfigDict(frozen=True)

    storage_id: str = Field(description="Identifier of the storage space holding the resource.")
    opaque_id: str = Field(description="Backend specific object identifier. Consumers should treat as opaque.")
