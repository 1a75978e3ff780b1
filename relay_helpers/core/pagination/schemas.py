"""Pagination schemas following the Relay cursor connection specification.

This module provides:

1. Request side:
   - PageRequest: the ``first`` / ``after`` arguments of a connection field
   - PaginationMetadata: what a cursor provider needs to know about a page

2. Response side (Relay specification):
   - PageInfo with navigation metadata
   - Edge wrapping each node with its cursor
   - Connection holding the total count, edges and page info

3. Simple REST style:
   - CursorPage with items, cursors and a has_more flag
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, Field

from relay_helpers.core.pagination.cursor import Cursor, CursorT, cursor_from_encoded_string

if TYPE_CHECKING:
    from relay_helpers.core.settings.pagination import PaginationSettings

T = TypeVar("T")


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Always derived by a cursor provider; build it by hand only when not
    using one.

    Attributes:
        has_next_page: Whether there is a page following this one
        has_previous_page: Whether there is a page preceding this one
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
    """

    has_next_page: bool = Field(
        description="Indicates whether there is a page following this current one"
    )
    has_previous_page: bool = Field(
        description="Indicates whether there is a page preceding this one"
    )
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item in the page",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item; pass to after: to get the following page",
    )

    model_config = {"frozen": True}

    @property
    def has_prev_page(self) -> bool:
        return self.has_previous_page


class PageRequest(BaseModel):
    """A Relay pagination request, built from a resolver's arguments.

    Many connection fields take the form:

        query {
            locations(first: 10, after: "b2Zmc2V0fHwxfHwxMA==") {
                edges { node { name } }
            }
        }

    Attributes:
        first: Number of items requested. ``None`` means everything.
        after: Encoded cursor of the last item the client has seen.
    """

    first: int | None = Field(
        default=None,
        ge=0,
        description="The number of items to return",
    )
    after: str | None = Field(
        default=None,
        description="A cursor to use as the pointer to the start of the page",
    )

    model_config = {"frozen": True}

    @classmethod
    def new(cls, first: int | None = None, after: Cursor | None = None) -> PageRequest:
        """Build a request from a page size and an already decoded cursor.

        Example:
            request = PageRequest.new(10, StringCursor(value="my-cursor"))
        """
        return cls(
            first=first,
            after=after.to_encoded_string() if after is not None else None,
        )

    @classmethod
    def from_arguments(
        cls,
        first: int | None,
        after: str | Cursor | None,
        *,
        settings: PaginationSettings | None = None,
        use_default: bool = False,
    ) -> PageRequest:
        """Build a request from raw resolver arguments.

        ``first`` is clamped to the configured maximum page size. An absent
        ``first`` stays absent (return everything) unless ``use_default`` is
        set, in which case it becomes the configured default page size.

        Args:
            first: Requested page size.
            after: Encoded cursor, or a cursor already parsed by a scalar.
            settings: Pagination settings; loaded from the environment if omitted.
            use_default: Apply ``default_page_size`` when ``first`` is absent.
        """
        if settings is None:
            from relay_helpers.core.settings import get_pagination_settings

            settings = get_pagination_settings()

        if use_default:
            first = settings.resolve_page_size(first)
        elif first is not None:
            first = settings.clamp(first)
        if isinstance(after, Cursor):
            after = after.to_encoded_string()
        return cls(first=first, after=after)

    def parsed_cursor(self, cursor_type: type[CursorT]) -> CursorT | None:
        """Decode ``after`` into the given cursor type.

        Returns:
            The decoded cursor, or ``None`` when no ``after`` was supplied.

        Raises:
            CursorError: If ``after`` is present but malformed.
        """
        if self.after is None:
            return None
        return cursor_from_encoded_string(cursor_type, self.after)


class PaginationMetadata(BaseModel):
    """What a cursor provider knows about the page it is describing.

    Attributes:
        total_count: Total number of items in the full result set
        page_request: The incoming request, if any
    """

    total_count: int = Field(description="Total number of items in the result set")
    page_request: PageRequest | None = Field(
        default=None,
        description="The incoming page request, if any",
    )

    model_config = {"frozen": True}


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        node: The actual data item
        cursor: Encoded cursor pointing at this item
    """

    node: T = Field(description="The data item")
    cursor: str | None = Field(default=None, description="Cursor for this item")

    model_config = {"arbitrary_types_allowed": True}

    @classmethod
    def from_cursor(cls, node: T, cursor: Cursor) -> Edge[T]:
        """Build an edge, encoding the given cursor object."""
        return cls(node=node, cursor=cursor.to_encoded_string())

    @classmethod
    def from_raw_cursor(cls, node: T, cursor: str | None) -> Edge[T]:
        """Build an edge from an already encoded cursor string."""
        return cls(node=node, cursor=cursor)


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection pattern for cursor pagination.

    Usage:
        connection = build_connection(
            nodes,
            total_items=len(all_rows),
            cursor_provider=OffsetCursorProvider(),
            page_request=PageRequest.from_arguments(first, after),
        )

    Client navigation:
        # First page
        locations(first: 10)

        # Next page (using end_cursor from previous response)
        locations(first: 10, after: "b2Zmc2V0fHw5")

    Attributes:
        count: Total number of items across all pages
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    count: int = Field(description="Total number of items, not the page size")
    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(description="Pagination metadata")

    model_config = {"arbitrary_types_allowed": True}

    @property
    def nodes(self) -> list[T]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]

    def to_cursor_page(self) -> CursorPage[T]:
        """Convert to simple REST-style pagination.

        Returns:
            CursorPage with items and cursors
        """
        return CursorPage(
            items=self.nodes,
            next_cursor=self.page_info.end_cursor if self.page_info.has_next_page else None,
            prev_cursor=self.page_info.start_cursor if self.page_info.has_previous_page else None,
            has_more=self.page_info.has_next_page,
            total_count=self.count,
        )


class CursorPage(BaseModel, Generic[T]):
    """Simple REST-style cursor pagination response.

    Attributes:
        items: List of data items
        next_cursor: Cursor for the next page (None if no more)
        prev_cursor: Cursor for the previous page (None if at start)
        has_more: Whether more items exist after this page
        total_count: Total count (optional)
    """

    items: list[T] = Field(default_factory=list, description="List of items")
    next_cursor: str | None = Field(
        default=None,
        description="Cursor to fetch next page",
    )
    prev_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item, when earlier items exist",
    )
    has_more: bool = Field(default=False, description="Whether more items exist")
    total_count: int | None = Field(default=None, description="Total count (optional)")

    model_config = {"arbitrary_types_allowed": True}


__all__ = [
    "Connection",
    "CursorPage",
    "Edge",
    "PageInfo",
    "PageRequest",
    "PaginationMetadata",
]
