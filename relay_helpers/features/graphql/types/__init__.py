"""GraphQL type definitions.

This package contains Strawberry types for:
- Cursor scalars (OffsetCursor, StringCursor)
- Base types (PageInfo)
- Connection and Edge factories, and the pagination input
"""

from __future__ import annotations

from relay_helpers.features.graphql.types.base import PageInfoType
from relay_helpers.features.graphql.types.pagination import (
    PageRequestInput,
    create_connection,
    create_edge,
    to_graphql_connection,
)
from relay_helpers.features.graphql.types.scalars import (
    OffsetCursorScalar,
    StringCursorScalar,
)

__all__ = [
    # Scalars
    "OffsetCursorScalar",
    "StringCursorScalar",
    # Base types
    "PageInfoType",
    # Pagination
    "PageRequestInput",
    "create_connection",
    "create_edge",
    "to_graphql_connection",
]
