"""GraphQL test fixtures.

Provides:
- A small Strawberry schema exposing offset and keyed connections
- The sample locations it serves
"""

# No postponed annotations: Strawberry resolves the generated connection
# types from this module's globals.

import pytest
import strawberry

from relay_helpers.core.pagination import (
    KeyedCursorProvider,
    OffsetCursor,
    OffsetCursorProvider,
    PageRequest,
    RelayIdentifier,
    StringCursor,
    TypeDiscriminator,
    build_connection,
)
from relay_helpers.features.graphql.types import (
    OffsetCursorScalar,
    PageRequestInput,
    StringCursorScalar,
    create_connection,
    to_graphql_connection,
)


class EntityType(TypeDiscriminator):
    LOCATION = 1


@strawberry.type
class Location:
    id: strawberry.ID
    name: str

    def cursor_key(self) -> str:
        return self.name


NAMES = [
    "Harbor",
    "Lighthouse",
    "Market",
    "Mill",
    "Orchard",
    "Quarry",
    "Abbey",
    "Bridge",
    "Forge",
    "Granary",
    "Keep",
    "Tannery",
    "Well",
]
ROWS = [(str(index), name) for index, name in enumerate(NAMES)]


def _to_location(row: tuple[str, str]) -> Location:
    key, name = row
    identifier = RelayIdentifier(identifier=key, type_discriminator=EntityType.LOCATION)
    return Location(id=strawberry.ID(str(identifier)), name=name)


LocationConnection = create_connection(Location, "Location")


@strawberry.type
class Query:
    @strawberry.field
    def locations(
        self,
        first: int | None = None,
        after: OffsetCursorScalar | None = None,
    ) -> LocationConnection:
        page_request = PageRequest.from_arguments(first, after)
        start = after.offset + 1 if after is not None else 0
        rows = ROWS[start:]
        if page_request.first is not None:
            rows = rows[:page_request.first]

        connection = build_connection(rows, len(ROWS), OffsetCursorProvider(), page_request)
        return to_graphql_connection(connection, LocationConnection, _to_location)

    @strawberry.field
    def locations_by_name(
        self,
        first: int | None = None,
        after: StringCursorScalar | None = None,
    ) -> LocationConnection:
        page_request = PageRequest.from_arguments(first, after)
        nodes = [_to_location(row) for row in ROWS]
        if after is not None:
            names = [node.name for node in nodes]
            nodes = nodes[names.index(after.value) + 1:] if after.value in names else []
        if page_request.first is not None:
            nodes = nodes[:page_request.first]

        connection = build_connection(nodes, len(ROWS), KeyedCursorProvider(), page_request)
        return to_graphql_connection(connection, LocationConnection)

    @strawberry.field
    def location_page(self, page: PageRequestInput) -> LocationConnection:
        page_request = page.to_page_request()
        after = page_request.parsed_cursor(OffsetCursor)
        start = after.offset + 1 if after is not None else 0
        rows = ROWS[start:]
        if page_request.first is not None:
            rows = rows[:page_request.first]

        connection = build_connection(rows, len(ROWS), OffsetCursorProvider(), page_request)
        return to_graphql_connection(connection, LocationConnection, _to_location)

    @strawberry.field
    def last_cursor(self) -> OffsetCursorScalar:
        return OffsetCursor(offset=len(ROWS) - 1)

    @strawberry.field
    def echo_key(self, cursor: StringCursorScalar) -> str:
        return cursor.value


@pytest.fixture(scope="module")
def schema() -> strawberry.Schema:
    return strawberry.Schema(query=Query)


@pytest.fixture
def string_cursor():
    """Encode a string cursor the way the keyed connection issues them."""

    def _encode(value: str) -> str:
        return StringCursor(value=value).to_encoded_string()

    return _encode
