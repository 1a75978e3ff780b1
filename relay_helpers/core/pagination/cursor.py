"""Cursor encoding and decoding for Relay pagination.

Cursors are opaque strings that encode a position in a result set.
Each cursor kind serializes itself to a raw string made of segments joined
by a two-character delimiter, the first segment being the kind tag:

    offset||20||10
    string||a1b2c3

The raw string is then base64 encoded with the URL-safe alphabet so it can
travel through query strings and GraphQL variables unchanged:

    b2Zmc2V0fHwyMHx8MTA=

Clients must treat the encoded form as opaque and only ever pass back
values they previously received.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar, Self, TypeVar

from pydantic import BaseModel, Field, field_validator

from relay_helpers.core.exceptions import (
    Base64DecodeError,
    InvalidCursorError,
    Utf8DecodeError,
)

logger = logging.getLogger(__name__)

CURSOR_SEGMENT_DELIMITER = "||"

_URLSAFE_BASE64 = re.compile(r"[A-Za-z0-9_-]*={0,2}")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def encode(raw: str) -> str:
    """Encode a raw cursor string into its opaque wire form.

    Args:
        raw: Raw, delimiter-joined cursor string. Must be valid Unicode;
            cursor models validate their string fields on construction.

    Returns:
        URL-safe base64 of the UTF-8 bytes of ``raw``.
    """
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii")


def decode(encoded: str) -> str:
    """Decode an opaque cursor back into its raw string.

    Missing ``=`` padding is tolerated so clients that strip it still work.

    Args:
        encoded: URL-safe base64 encoded cursor.

    Returns:
        The raw cursor string.

    Raises:
        Base64DecodeError: If the payload is not URL-safe base64.
        Utf8DecodeError: If the decoded bytes are not valid UTF-8.
    """
    if not _URLSAFE_BASE64.fullmatch(encoded):
        raise Base64DecodeError(extra={"cursor": encoded})

    stripped = encoded.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        decoded = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(
            detail=f"Cursor is not valid base64: {e}",
            extra={"cursor": encoded},
        ) from e

    try:
        return decoded.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8DecodeError(extra={"cursor": encoded}) from e


class Cursor(BaseModel, ABC):
    """Base class for all cursor kinds.

    Subclasses define a ``kind`` tag, how they serialize to a raw string and
    how they rebuild themselves from the delimiter-split parts of one.
    Encoding and decoding through base64 is shared.

    Example:
        class PageTokenCursor(Cursor):
            kind: ClassVar[str] = "token"
            token: str

            def to_raw_string(self) -> str:
                return f"token||{self.token}"

            @classmethod
            def from_parts(cls, raw: str, parts: list[str]) -> PageTokenCursor:
                return cls(token=parts[1])
    """

    kind: ClassVar[str]

    model_config = {"frozen": True}

    @abstractmethod
    def to_raw_string(self) -> str:
        """Serialize the cursor into a string ready to be base64 encoded."""

    @classmethod
    @abstractmethod
    def from_parts(cls, raw: str, parts: list[str]) -> Self:
        """Build the cursor from its raw string and the delimiter-split parts.

        Args:
            raw: The full raw cursor string.
            parts: ``raw`` split on ``CURSOR_SEGMENT_DELIMITER``; the first
                element is the kind tag.

        Raises:
            InvalidCursorError: If the parts cannot form this cursor kind.
        """

    def to_encoded_string(self) -> str:
        """Build the opaque, URL-safe encoded form of the cursor."""
        return encode(self.to_raw_string())

    @classmethod
    def from_encoded_string(cls, encoded: str) -> Self:
        """Decode a cursor of this kind from its opaque encoded form.

        Raises:
            Base64DecodeError: If the payload is not valid base64.
            Utf8DecodeError: If the payload is not valid UTF-8.
            InvalidCursorError: If the kind tag or segment count is wrong.
        """
        raw = decode(encoded)
        parts = raw.split(CURSOR_SEGMENT_DELIMITER)
        if parts[0] != cls.kind:
            raise InvalidCursorError(
                detail=f"Expected a {cls.kind!r} cursor, got {parts[0]!r}",
                extra={"expected_kind": cls.kind, "kind": parts[0]},
            )
        return cls.from_parts(raw, parts)

    def __str__(self) -> str:
        return self.to_raw_string()


CursorT = TypeVar("CursorT", bound=Cursor)


def cursor_from_encoded_string(cursor_type: type[CursorT], encoded: str) -> CursorT:
    """Decode an encoded cursor into the given concrete cursor type.

    Example:
        cursor = cursor_from_encoded_string(OffsetCursor, "b2Zmc2V0fHwxfHwxMA==")
        cursor.offset  # 1
    """
    return cursor_type.from_encoded_string(encoded)


def _parse_non_negative_int(value: str) -> int | None:
    if not _INTEGER.fullmatch(value):
        return None
    parsed = int(value)
    return parsed if parsed >= 0 else None


class OffsetCursor(Cursor):
    """A simple offset-based cursor, similar to SQL LIMIT and OFFSET.

    Attributes:
        offset: Zero-based index of the item the cursor points at. When used
            as ``after``, the next page starts at ``offset + 1``.
        first: Page size in effect when the cursor was issued.
    """

    kind: ClassVar[str] = "offset"

    offset: int = Field(default=0, ge=0, description="Index of the item pointed at")
    first: int | None = Field(default=None, ge=0, description="Page size at issuance")

    def to_raw_string(self) -> str:
        if self.first is not None:
            return CURSOR_SEGMENT_DELIMITER.join(
                [self.kind, str(self.offset), str(self.first)]
            )
        return CURSOR_SEGMENT_DELIMITER.join([self.kind, str(self.offset)])

    @classmethod
    def from_parts(cls, raw: str, parts: list[str]) -> OffsetCursor:
        """Rebuild an offset cursor, leniently.

        An unparsable offset falls back to 0 and an unparsable first to
        ``None`` instead of failing the whole request.
        """
        if len(parts) not in (2, 3):
            raise InvalidCursorError(
                detail=f"Offset cursor needs 2 or 3 segments, got {len(parts)}",
                extra={"segments": len(parts)},
            )

        offset = _parse_non_negative_int(parts[1])
        if offset is None:
            logger.debug("Unparsable offset %r in cursor, defaulting to 0", parts[1])
            offset = 0

        first = None
        if len(parts) == 3:
            first = _parse_non_negative_int(parts[2])
            if first is None:
                logger.debug("Unparsable first %r in cursor, ignoring it", parts[2])

        return cls(offset=offset, first=first)


class StringCursor(Cursor):
    """Cursor wrapping an opaque string key.

    Useful for stores such as DynamoDB or other NoSQL systems that hand back
    their own continuation token or where items have a stable primary key.
    """

    kind: ClassVar[str] = "string"

    value: str = Field(default="", description="Opaque key")

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Reject values that cannot be encoded as UTF-8 (lone surrogates)."""
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as e:
            msg = f"Cursor value is not valid Unicode: {e.reason}"
            raise ValueError(msg) from e
        return v

    def to_raw_string(self) -> str:
        return f"{self.kind}{CURSOR_SEGMENT_DELIMITER}{self.value}"

    @classmethod
    def from_parts(cls, raw: str, parts: list[str]) -> StringCursor:
        if len(parts) < 2:
            raise InvalidCursorError(
                detail="String cursor is missing its value segment",
                extra={"segments": len(parts)},
            )
        # Everything after the kind tag, so values containing the delimiter survive.
        return cls(value=raw.split(CURSOR_SEGMENT_DELIMITER, 1)[1])


__all__ = [
    "CURSOR_SEGMENT_DELIMITER",
    "Cursor",
    "OffsetCursor",
    "StringCursor",
    "cursor_from_encoded_string",
    "decode",
    "encode",
]
