"""Settings-bound entry point for protocol front ends."""

from __future__ import annotations

from .config import CodecSettings
from .models import ResourceId
from .utils.identifiers import unwrap, unwrap_or_none, wrap, wrap_resource_id


class ResourceIdCodec:
    """Façade applying :class:`CodecSettings` to the identifier helpers."""

    def __init__(self, settings: CodecSettings | None = None) -> None:
        self.settings = settings or CodecSettings()

    def wrap(self, storage_id: str, opaque_id: str) -> str:
        return wrap(storage_id, opaque_id, strict=self.settings.strict_storage_id)

    def wrap_resource_id(self, resource_id: ResourceId) -> str:
        return wrap_resource_id(resource_id, strict=self.settings.strict_storage_id)

    def unwrap(self, token: str) -> ResourceId:
        return unwrap(token)

    def unwrap_or_none(self, token: str) -> ResourceId | None:
        return unwrap_or_none(token)
