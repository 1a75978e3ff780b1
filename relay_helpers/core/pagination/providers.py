"""Cursor providers.

A cursor provider knows how to build a cursor for every item in a page and
how to derive the ``PageInfo`` for that page, so resolvers never have to
compute either by hand.

Two providers are built in:

- OffsetCursorProvider: offset/limit pagination over stores with a cheap
  total count (``COUNT`` + ``LIMIT/OFFSET``).
- KeyedCursorProvider: continuation-key pagination over stores such as
  DynamoDB where neither a total count nor offset arithmetic is available.

Note:
    Offset cursors are prone to off-by-one errors. A cursor passed as
    ``after`` points *at* the last item the client saw, so the next page
    starts at ``offset + 1`` when slicing the underlying data.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar, runtime_checkable

from relay_helpers.core.exceptions import CursorError
from relay_helpers.core.pagination.cursor import Cursor, OffsetCursor, StringCursor
from relay_helpers.core.pagination.schemas import PageInfo, PaginationMetadata

logger = logging.getLogger(__name__)

ItemT_contra = TypeVar("ItemT_contra", contravariant=True)


class CursorProvider(ABC, Generic[ItemT_contra]):
    """Interface for building cursors and page info for a page of items."""

    @abstractmethod
    def get_cursor_for_item(
        self,
        metadata: PaginationMetadata,
        item_index: int,
        item: ItemT_contra,
    ) -> Cursor:
        """Build the cursor for one item of the page.

        Args:
            metadata: Information about the result set being built.
            item_index: Index of the item within the page.
            item: The item itself.
        """

    @abstractmethod
    def get_page_info(
        self,
        metadata: PaginationMetadata,
        items: Sequence[ItemT_contra],
    ) -> PageInfo:
        """Build the PageInfo for the page."""

    def _boundary_cursors(
        self,
        metadata: PaginationMetadata,
        items: Sequence[ItemT_contra],
    ) -> tuple[str | None, str | None]:
        if not items:
            return None, None
        last_index = len(items) - 1
        start = self.get_cursor_for_item(metadata, 0, items[0])
        end = self.get_cursor_for_item(metadata, last_index, items[last_index])
        return start.to_encoded_string(), end.to_encoded_string()


class OffsetCursorProvider(CursorProvider[object]):
    """Cursor provider for offset-based pagination.

    The item cursors continue from the offset of the incoming ``after``
    cursor. A missing or undecodable ``after`` means the page starts at the
    very first item.

    Example:
        nodes = rows[start:start + first]
        connection = build_connection(
            nodes,
            total_items=len(rows),
            cursor_provider=OffsetCursorProvider(),
            page_request=PageRequest(first=first, after=after),
        )
    """

    def _current_cursor(self, metadata: PaginationMetadata) -> tuple[OffsetCursor, bool]:
        """Resolve the cursor the page continues from.

        Returns:
            The decoded ``after`` cursor (or the default cursor) and whether
            one was actually decoded.
        """
        if metadata.page_request is None:
            return OffsetCursor(), False
        try:
            cursor = metadata.page_request.parsed_cursor(OffsetCursor)
        except CursorError as e:
            logger.debug(
                "Ignoring undecodable after cursor, starting from the first page",
                extra={"cursor": metadata.page_request.after, "reason": e.detail},
            )
            return OffsetCursor(), False
        if cursor is None:
            return OffsetCursor(), False
        return cursor, True

    def get_cursor_for_item(
        self,
        metadata: PaginationMetadata,
        item_index: int,
        item: object,
    ) -> OffsetCursor:
        current, decoded = self._current_cursor(metadata)
        # The after cursor points at the last item already seen.
        offset_adjust = 1 if decoded else 0
        return OffsetCursor(
            offset=current.offset + offset_adjust + item_index,
            first=current.first,
        )

    def get_page_info(
        self,
        metadata: PaginationMetadata,
        items: Sequence[object],
    ) -> PageInfo:
        current, _ = self._current_cursor(metadata)

        has_next_page = False
        page_request = metadata.page_request
        if page_request is not None and page_request.first is not None:
            has_next_page = current.offset + page_request.first < metadata.total_count

        start_cursor, end_cursor = self._boundary_cursors(metadata, items)
        return PageInfo(
            has_next_page=has_next_page,
            has_previous_page=current.offset > 0,
            start_cursor=start_cursor,
            end_cursor=end_cursor,
        )


@runtime_checkable
class CursorByKey(Protocol):
    """Items usable with KeyedCursorProvider expose a stable cursor key."""

    def cursor_key(self) -> str: ...


class KeyedCursorProvider(CursorProvider[CursorByKey]):
    """Cursor provider for opaque, key-based continuation tokens.

    Each item's cursor wraps its ``cursor_key()``.

    If any ``after`` is provided, there is assumed to be a previous page.
    If any items are returned, there is assumed to be a next page: the only
    reliable last page is an empty one. Frontends expecting ``hasNextPage``
    to turn false on the last non-empty page will issue one extra request.
    """

    def get_cursor_for_item(
        self,
        metadata: PaginationMetadata,
        item_index: int,
        item: CursorByKey,
    ) -> StringCursor:
        if not isinstance(item, CursorByKey):
            msg = f"{type(item).__name__} does not implement cursor_key()"
            raise TypeError(msg)
        return StringCursor(value=item.cursor_key())

    def get_page_info(
        self,
        metadata: PaginationMetadata,
        items: Sequence[CursorByKey],
    ) -> PageInfo:
        start_cursor, end_cursor = self._boundary_cursors(metadata, items)
        page_request = metadata.page_request
        return PageInfo(
            has_next_page=bool(items),
            has_previous_page=page_request is not None and page_request.after is not None,
            start_cursor=start_cursor,
            end_cursor=end_cursor,
        )


__all__ = [
    "CursorByKey",
    "CursorProvider",
    "KeyedCursorProvider",
    "OffsetCursorProvider",
]
