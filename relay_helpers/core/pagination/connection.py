"""Building Relay connections from a page of nodes.

The caller slices the underlying data according to ``first`` / ``after``
before calling in here; this module only describes the page it is given.

Example:
    rows = load_locations()
    nodes = rows
    if after_cursor is not None:
        nodes = nodes[after_cursor.offset + 1:]
    if first is not None:
        nodes = nodes[:first]

    connection = build_connection(
        nodes,
        total_items=len(rows),
        cursor_provider=OffsetCursorProvider(),
        page_request=PageRequest.new(first, after_cursor),
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from relay_helpers.core.pagination.schemas import (
    Connection,
    Edge,
    PageRequest,
    PaginationMetadata,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from relay_helpers.core.pagination.cursor import Cursor
    from relay_helpers.core.pagination.providers import CursorProvider

N = TypeVar("N")


def build_edge(node: N, cursor: Cursor) -> Edge[N]:
    """Wrap a node in an edge carrying the encoded form of ``cursor``."""
    return Edge.from_cursor(node, cursor)


def build_connection(
    nodes: Sequence[N],
    total_items: int,
    cursor_provider: CursorProvider[N],
    page_request: PageRequest | None = None,
) -> Connection[N]:
    """Build a connection, its edges and page info from a page of nodes.

    Args:
        nodes: The nodes of the current page, in result order.
        total_items: Total number of items in the whole result set.
        cursor_provider: Provider generating item cursors and the page info.
        page_request: The ``first`` / ``after`` request the page answers.

    Returns:
        Connection whose ``count`` is ``total_items`` and whose edges follow
        the order of ``nodes``.
    """
    metadata = PaginationMetadata(total_count=total_items, page_request=page_request)
    edges = [
        build_edge(node, cursor_provider.get_cursor_for_item(metadata, index, node))
        for index, node in enumerate(nodes)
    ]
    return Connection(
        count=total_items,
        edges=edges,
        page_info=cursor_provider.get_page_info(metadata, nodes),
    )


__all__ = ["build_connection", "build_edge"]
