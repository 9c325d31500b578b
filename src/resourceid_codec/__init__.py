"""resourceid-codec package."""

from importlib.metadata import PackageNotFoundError, version as _version

from .config import CodecSettings, load_settings
from .exceptions import (
    ConfigurationError,
    DecodeError,
    DecodeErrorKind,
    ResourceIdError,
    StorageIdDelimiterError,
)
from .models import ResourceId
from .service import ResourceIdCodec
from .utils.identifiers import ID_DELIMITER, unwrap, unwrap_or_none, wrap, wrap_resource_id

__all__ = [
    "__version__",
    "ID_DELIMITER",
    "CodecSettings",
    "ConfigurationError",
    "DecodeError",
    "DecodeErrorKind",
    "ResourceId",
    "ResourceIdCodec",
    "ResourceIdError",
    "StorageIdDelimiterError",
    "load_settings",
    "unwrap",
    "unwrap_or_none",
    "wrap",
    "wrap_resource_id",
]
try:
    __version__ = _version("resourceid-codec")
except PackageNotFoundError:
    __version__ = "0.0.0"
