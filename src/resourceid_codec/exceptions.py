"""Custom exceptions for the resource identifier codec."""

from __future__ import annotations

from enum import Enum


class ResourceIdError(Exception):
    """Base exception for resource identifier failures."""


class ConfigurationError(ResourceIdError):
    """Raised when configuration is invalid or incomplete."""


class StorageIdDelimiterError(ResourceIdError):
    """Raised by strict wrapping when the storage id contains the delimiter."""


class DecodeErrorKind(str, Enum):
    """Reasons a token could not be unwrapped."""

    INVALID_ENCODING = "invalid_encoding"
    MALFORMED_STRUCTURE = "malformed_structure"
    INVALID_UTF8 = "invalid_utf8"


class DecodeError(ResourceIdError):
    """Raised when a token is not one produced by :func:`wrap`."""

    def __init__(self, kind: DecodeErrorKind, token: str, message: str | None = None) -> None:
        self.kind = kind
        self.token = token
        super().__init__(message or f"Unable to unwrap token ({kind.value})")
