"""Cursor scalars.

Expose cursors as GraphQL scalars so resolvers receive decoded cursor
objects and return cursor objects that serialize to their opaque form:

    @strawberry.field
    def locations(self, first: int | None = None, after: OffsetCursorScalar | None = None)
"""

from __future__ import annotations

from typing import Any

import strawberry

from relay_helpers.core.exceptions import CursorError
from relay_helpers.core.pagination.cursor import Cursor, CursorT, OffsetCursor, StringCursor


def _serialize_cursor(value: Cursor | str) -> str:
    if isinstance(value, Cursor):
        return value.to_encoded_string()
    return value


def _cursor_parser(cursor_type: type[CursorT]) -> Any:
    def parse(value: Any) -> CursorT:
        if not isinstance(value, str):
            msg = f"{cursor_type.__name__} must be a string"
            raise ValueError(msg)
        try:
            return cursor_type.from_encoded_string(value)
        except CursorError as e:
            raise ValueError(e.detail) from e

    return parse


OffsetCursorScalar = strawberry.scalar(
    OffsetCursor,
    name="OffsetCursor",
    description="An opaque offset pagination cursor",
    serialize=_serialize_cursor,
    parse_value=_cursor_parser(OffsetCursor),
)

StringCursorScalar = strawberry.scalar(
    StringCursor,
    name="StringCursor",
    description="An opaque key pagination cursor",
    serialize=_serialize_cursor,
    parse_value=_cursor_parser(StringCursor),
)

__all__ = ["OffsetCursorScalar", "StringCursorScalar"]
