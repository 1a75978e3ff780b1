"""Generic Relay pagination types and factories for GraphQL.

Instead of hand-writing ``Connection`` and ``Edge`` types for every node
type, generate them:

    @strawberry.type
    class Location:
        id: strawberry.ID
        name: str

    LocationConnection = create_connection(Location, "Location")

    # Produces:
    # type LocationConnection {
    #     count: Int!
    #     edges: [LocationEdge!]!
    #     pageInfo: PageInfo!
    # }
    #
    # type LocationEdge {
    #     node: Location!
    #     cursor: String
    # }

Then build the core connection and convert it:

    connection = build_connection(nodes, total, OffsetCursorProvider(), page_request)
    return to_graphql_connection(connection, LocationConnection)
"""

# No postponed annotations: the generated classes reference local
# variables that Strawberry resolves at decoration time.

from collections.abc import Callable
from typing import Any

import strawberry

from relay_helpers.core.pagination.schemas import Connection, PageRequest
from relay_helpers.core.settings.pagination import PaginationSettings
from relay_helpers.features.graphql.types.base import PageInfoType

__all__ = [
    "PageRequestInput",
    "create_connection",
    "create_edge",
    "to_graphql_connection",
]

_edge_types: dict[str, type] = {}
_connection_types: dict[str, type] = {}
_connection_edges: dict[type, type] = {}
_node_types: dict[str, type] = {}


@strawberry.input(description="Input for cursor-based pagination")
class PageRequestInput:
    """Relay ``first`` / ``after`` pagination arguments."""

    first: int | None = strawberry.field(
        default=None,
        description="Number of items to return",
    )
    after: str | None = strawberry.field(
        default=None,
        description="Cursor of the last item already received (exclusive)",
    )

    def to_page_request(
        self,
        settings: PaginationSettings | None = None,
        *,
        use_default: bool = False,
    ) -> PageRequest:
        """Convert into a core PageRequest, clamping ``first`` to the maximum page size.

        With ``use_default`` an absent ``first`` becomes the default page size.
        """
        return PageRequest.from_arguments(
            self.first,
            self.after,
            settings=settings,
            use_default=use_default,
        )


def _check_node_type(node_type: type, type_name_prefix: str) -> None:
    bound = _node_types.get(type_name_prefix)
    if bound is not None and bound is not node_type:
        msg = (
            f"Type name prefix {type_name_prefix!r} is already used for "
            f"{bound.__name__}, cannot reuse it for {node_type.__name__}"
        )
        raise ValueError(msg)


def create_edge(node_type: type, type_name_prefix: str) -> type:
    """Create a Relay-compliant Edge type for a node type.

    Args:
        node_type: The Strawberry type used as the edge's node
        type_name_prefix: Prefix for the type name (e.g., "Location" -> "LocationEdge")

    Returns:
        A Strawberry Edge type class. Calling again with the same prefix
        returns the same class.

    Raises:
        ValueError: If the prefix is already bound to a different node type.
    """
    _check_node_type(node_type, type_name_prefix)
    if type_name_prefix in _edge_types:
        return _edge_types[type_name_prefix]

    @strawberry.type(
        name=f"{type_name_prefix}Edge",
        description=f"Edge type for {type_name_prefix}.",
    )
    class EdgeType:
        node: node_type = strawberry.field(  # type: ignore[valid-type]
            description="The node containing the actual data"
        )
        cursor: str | None = strawberry.field(
            default=None,
            description="Opaque cursor for this edge used in pagination",
        )

    _node_types[type_name_prefix] = node_type
    _edge_types[type_name_prefix] = EdgeType
    return EdgeType


def create_connection(node_type: type, type_name_prefix: str) -> type:
    """Create a Relay-compliant Connection type for a node type.

    Args:
        node_type: The Strawberry type used as the node
        type_name_prefix: Prefix for the type name (e.g., "Location" -> "LocationConnection")

    Returns:
        A Strawberry Connection type class with ``count``, ``edges`` and
        ``pageInfo`` fields. Calling again with the same prefix returns the
        same class.

    Raises:
        ValueError: If the prefix is already bound to a different node type.
    """
    _check_node_type(node_type, type_name_prefix)
    if type_name_prefix in _connection_types:
        return _connection_types[type_name_prefix]

    edge_type = create_edge(node_type, type_name_prefix)

    @strawberry.type(
        name=f"{type_name_prefix}Connection",
        description=f"Connection type for {type_name_prefix}.",
    )
    class ConnectionType:
        count: int = strawberry.field(
            description="Total number of items across all pages"
        )
        edges: list[edge_type] = strawberry.field(  # type: ignore[valid-type]
            description="List of edges containing nodes and their cursors"
        )
        page_info: PageInfoType = strawberry.field(
            description="Pagination information including hasNextPage, hasPreviousPage, etc."
        )

    _connection_types[type_name_prefix] = ConnectionType
    _connection_edges[ConnectionType] = edge_type
    return ConnectionType


def to_graphql_connection(
    connection: Connection[Any],
    connection_type: type,
    node_converter: Callable[[Any], Any] | None = None,
) -> Any:
    """Convert a core Connection into an instance of a generated Connection type.

    Args:
        connection: Connection built by ``build_connection``
        connection_type: Type returned by ``create_connection``
        node_converter: Optional function turning each core node into the
            Strawberry node type (e.g. a row into a GraphQL object)

    Raises:
        ValueError: If ``connection_type`` was not produced by ``create_connection``.
    """
    edge_type = _connection_edges.get(connection_type)
    if edge_type is None:
        msg = f"{connection_type.__name__} was not created by create_connection()"
        raise ValueError(msg)

    convert = node_converter or (lambda node: node)
    return connection_type(
        count=connection.count,
        edges=[
            edge_type(node=convert(edge.node), cursor=edge.cursor)
            for edge in connection.edges
        ],
        page_info=PageInfoType.from_page_info(connection.page_info),
    )
