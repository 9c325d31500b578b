"""Helpers for wrapping storage resource identifiers into opaque tokens.

A token is the URL-safe, padded base64 encoding (RFC 4648 section 5) of
``storage_id + ":" + opaque_id``. Tokens only contain ``[A-Za-z0-9_=-]`` so
they can be placed in XML text content (e.g. a PROPFIND response) and in URL
path segments without escaping. The format is shared with existing clients and
must stay byte-identical.

Decoding is deliberately stricter than base64 decoders that skip line breaks:
a carriage return or newline anywhere in a token, trailing ones included, is
rejected as an invalid encoding.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from ..exceptions import DecodeError, DecodeErrorKind, StorageIdDelimiterError
from ..models import ResourceId

logger = logging.getLogger(__name__)

ID_DELIMITER = ":"

_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")


def wrap(storage_id: str, opaque_id: str, *, strict: bool = False) -> str:
    """Encode a storage id and opaque id into a single XML and URL safe token.

    A storage id containing :data:`ID_DELIMITER` is wrapped as-is and will not
    survive :func:`unwrap` intact, since the first delimiter ends the storage
    id. Pass ``strict=True`` to reject such ids instead.
    """
    if strict and ID_DELIMITER in storage_id:
        raise StorageIdDelimiterError(
            f"storage id {storage_id!r} contains the reserved delimiter {ID_DELIMITER!r}"
        )
    raw = f"{storage_id}{ID_DELIMITER}{opaque_id}".encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")


def wrap_resource_id(resource_id: ResourceId, *, strict: bool = False) -> str:
    """Wrap a :class:`ResourceId` value, see :func:`wrap`."""
    return wrap(resource_id.storage_id, resource_id.opaque_id, strict=strict)


def unwrap(token: str) -> ResourceId:
    """Decode a token produced by :func:`wrap`.

    Raises :class:`DecodeError` whose ``kind`` tells whether the token was not
    URL-safe base64, lacked the delimiter, or carried invalid UTF-8.
    """
    decoded = _decode_token(token)

    storage_raw, sep, opaque_raw = decoded.partition(ID_DELIMITER.encode("ascii"))
    if not sep:
        raise DecodeError(
            DecodeErrorKind.MALFORMED_STRUCTURE,
            token,
            "could not find two parts with the given delimiter",
        )

    try:
        storage_id = storage_raw.decode("utf-8")
        opaque_id = opaque_raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(DecodeErrorKind.INVALID_UTF8, token, "invalid utf8 string found") from exc

    return ResourceId(storage_id=storage_id, opaque_id=opaque_id)


def unwrap_or_none(token: str) -> ResourceId | None:
    """Return the wrapped resource id, or ``None`` when the token is not one."""
    try:
        return unwrap(token)
    except DecodeError as exc:
        logger.debug("Rejected resource id token %r: %s", token, exc.kind.value)
        return None


def _decode_token(token: str) -> bytes:
    # b64decode maps the URL-safe altchars onto "+/" before validating, so the
    # alphabet and padding are checked here against the raw token.
    if len(token) % 4 or _TOKEN_PATTERN.fullmatch(token) is None:
        raise DecodeError(DecodeErrorKind.INVALID_ENCODING, token, "token is not URL-safe base64")
    try:
        return base64.urlsafe_b64decode(token)
    except binascii.Error as exc:
        raise DecodeError(DecodeErrorKind.INVALID_ENCODING, token, f"token is not URL-safe base64: {exc}") from exc
