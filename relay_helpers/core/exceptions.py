"""Exception classes for cursor and identifier handling."""

from __future__ import annotations

from typing import Any


class RelayHelpersException(Exception):
    """Base exception for the relay helpers package.

    Follows RFC 7807 Problem Details so that resolvers can surface the
    error to API clients without extra translation.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        extra: Additional context-specific information about the error.

    Example:
            raise RelayHelpersException(
            status_code=400,
            detail="Cursor could not be decoded",
            type="invalid-cursor",
            extra={"cursor": "not-a-cursor"}
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        titles = {
            400: "Bad Request",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
        }
        return titles.get(status_code, "Error")


class CursorError(RelayHelpersException):
    """Base class for all cursor decoding failures.

    Example:
            raise CursorError(
            detail="Cursor is not valid",
            extra={"cursor": "b2Zmc2V0"}
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "invalid-cursor",
        title: str = "Invalid Cursor",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            title=title,
            extra=extra,
        )


class InvalidCursorError(CursorError):
    """Raised when a decoded cursor has the wrong shape.

    Covers a segment count the cursor kind cannot reconstruct itself from,
    and a kind tag that does not match the requested cursor type.
    """

    def __init__(
        self,
        detail: str = "Cursor has an invalid format",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="invalid-cursor", extra=extra)


class Base64DecodeError(CursorError):
    """Raised when a cursor payload is not valid base64."""

    def __init__(
        self,
        detail: str = "Cursor is not valid base64",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="cursor-base64-decode-error", extra=extra)


class Utf8DecodeError(CursorError):
    """Raised when a base64 decoded cursor payload is not valid UTF-8."""

    def __init__(
        self,
        detail: str = "Cursor is not valid UTF-8",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail=detail, type="cursor-utf8-decode-error", extra=extra)


class InvalidIdentifierError(RelayHelpersException):
    """Raised when a Relay global identifier cannot be decoded.

    Example:
            raise InvalidIdentifierError(
            detail="Unknown type discriminator: weapon",
            extra={"discriminator": "weapon"}
        )
    """

    def __init__(
        self,
        detail: str,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type="invalid-identifier",
            title="Invalid Identifier",
            extra=extra,
        )


__all__ = [
    "Base64DecodeError",
    "CursorError",
    "InvalidCursorError",
    "InvalidIdentifierError",
    "RelayHelpersException",
    "Utf8DecodeError",
]
