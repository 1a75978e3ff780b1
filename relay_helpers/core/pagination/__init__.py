"""Relay cursor pagination primitives.

This package provides:
- Opaque, URL-safe cursors (offset based and string keyed)
- PageInfo derivation through cursor providers
- Connection and Edge assembly around a page of nodes
- Type-qualified global identifiers

Offset pagination:
    connection = build_connection(
        nodes,
        total_items=total,
        cursor_provider=OffsetCursorProvider(),
        page_request=PageRequest(first=first, after=after),
    )

Keyed pagination (items implement ``cursor_key()``):
    connection = build_connection(
        items,
        total_items=total,
        cursor_provider=KeyedCursorProvider(),
        page_request=PageRequest(first=first, after=after),
    )
"""

from relay_helpers.core.pagination.connection import build_connection, build_edge
from relay_helpers.core.pagination.cursor import (
    CURSOR_SEGMENT_DELIMITER,
    Cursor,
    OffsetCursor,
    StringCursor,
    cursor_from_encoded_string,
)
from relay_helpers.core.pagination.identifier import RelayIdentifier, TypeDiscriminator
from relay_helpers.core.pagination.providers import (
    CursorByKey,
    CursorProvider,
    KeyedCursorProvider,
    OffsetCursorProvider,
)
from relay_helpers.core.pagination.schemas import (
    Connection,
    CursorPage,
    Edge,
    PageInfo,
    PageRequest,
    PaginationMetadata,
)

__all__ = [
    "CURSOR_SEGMENT_DELIMITER",
    # Schemas
    "Connection",
    # Cursors
    "Cursor",
    # Providers
    "CursorByKey",
    "CursorPage",
    "CursorProvider",
    "Edge",
    "KeyedCursorProvider",
    "OffsetCursor",
    "OffsetCursorProvider",
    "PageInfo",
    "PageRequest",
    "PaginationMetadata",
    # Identifiers
    "RelayIdentifier",
    "StringCursor",
    "TypeDiscriminator",
    # Assembly
    "build_connection",
    "build_edge",
    "cursor_from_encoded_string",
]
