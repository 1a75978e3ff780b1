"""Base GraphQL types for Relay pagination.

Mirrors relay_helpers.core.pagination.schemas.PageInfo as a Strawberry type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from relay_helpers.core.pagination.schemas import PageInfo


@strawberry.type(name="PageInfo", description="Pagination information")
class PageInfoType:
    """GraphQL Relay PageInfo for cursor-based pagination."""

    has_next_page: bool = strawberry.field(
        description="Indicates whether there is a page following this current one"
    )
    has_previous_page: bool = strawberry.field(
        description="Indicates whether there is a page preceding this one"
    )
    start_cursor: str | None = strawberry.field(
        default=None,
        description="Cursor of the first item in the page",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description=(
            "An opaque cursor that when passed to after: in a query will return "
            "the following page of results."
        ),
    )

    @classmethod
    def from_page_info(cls, page_info: PageInfo) -> PageInfoType:
        return cls(
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        )


__all__ = ["PageInfoType"]
