"""Tests executing paginated queries against a Strawberry schema."""

from __future__ import annotations

import base64

import pytest

from relay_helpers.core.pagination import OffsetCursor

pytestmark = pytest.mark.graphql

LOCATIONS_QUERY = """
query Locations($first: Int, $after: OffsetCursor) {
    locations(first: $first, after: $after) {
        count
        edges {
            cursor
            node { id name }
        }
        pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
    }
}
"""

LOCATIONS_BY_NAME_QUERY = """
query LocationsByName($first: Int, $after: StringCursor) {
    locationsByName(first: $first, after: $after) {
        count
        edges { cursor node { name } }
        pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
    }
}
"""

LOCATION_PAGE_QUERY = """
query LocationPage($page: PageRequestInput!) {
    locationPage(page: $page) {
        edges { node { name } }
        pageInfo { hasNextPage hasPreviousPage endCursor }
    }
}
"""


class TestOffsetConnectionQuery:
    """Test the offset connection end to end."""

    def test_first_page(self, schema):
        result = schema.execute_sync(LOCATIONS_QUERY, variable_values={"first": 5})

        assert result.errors is None
        data = result.data["locations"]
        assert data["count"] == 13
        assert [edge["node"]["name"] for edge in data["edges"]] == [
            "Harbor",
            "Lighthouse",
            "Market",
            "Mill",
            "Orchard",
        ]
        assert data["pageInfo"]["hasNextPage"] is True
        assert data["pageInfo"]["hasPreviousPage"] is False
        assert data["pageInfo"]["endCursor"] == OffsetCursor(offset=4).to_encoded_string()

    def test_node_ids_are_relay_identifiers(self, schema):
        result = schema.execute_sync(LOCATIONS_QUERY, variable_values={"first": 1})

        node = result.data["locations"]["edges"][0]["node"]
        assert base64.urlsafe_b64decode(node["id"]) == b"location::0"

    def test_walk_all_pages(self, schema):
        names = []
        page_sizes = []
        variables = {"first": 5}

        while True:
            result = schema.execute_sync(LOCATIONS_QUERY, variable_values=variables)
            assert result.errors is None
            data = result.data["locations"]
            names.extend(edge["node"]["name"] for edge in data["edges"])
            page_sizes.append(len(data["edges"]))
            if not data["pageInfo"]["hasNextPage"]:
                break
            variables = {"first": 5, "after": data["pageInfo"]["endCursor"]}

        assert page_sizes == [5, 5, 3]
        assert len(set(names)) == 13

    def test_page_after_cursor(self, schema):
        after = OffsetCursor(offset=9).to_encoded_string()

        result = schema.execute_sync(
            LOCATIONS_QUERY,
            variable_values={"first": 5, "after": after},
        )

        data = result.data["locations"]
        assert [edge["node"]["name"] for edge in data["edges"]] == ["Keep", "Tannery", "Well"]
        assert data["pageInfo"]["hasNextPage"] is False
        assert data["pageInfo"]["hasPreviousPage"] is True
        assert data["edges"][0]["cursor"] == OffsetCursor(offset=10).to_encoded_string()

    def test_first_is_clamped(self, schema, monkeypatch):
        monkeypatch.setenv("PAGINATION_DEFAULT_PAGE_SIZE", "2")
        monkeypatch.setenv("PAGINATION_MAX_PAGE_SIZE", "3")

        result = schema.execute_sync(LOCATIONS_QUERY, variable_values={"first": 50})

        assert result.errors is None
        assert len(result.data["locations"]["edges"]) == 3

    def test_invalid_cursor_variable(self, schema):
        result = schema.execute_sync(
            LOCATIONS_QUERY,
            variable_values={"first": 5, "after": "not a cursor!"},
        )

        assert result.errors
        assert "OffsetCursor" in result.errors[0].message

    def test_invalid_cursor_literal(self, schema):
        result = schema.execute_sync('{ locations(first: 5, after: "!!!") { count } }')

        assert result.errors

    def test_cursor_of_another_kind(self, schema, string_cursor):
        result = schema.execute_sync(
            LOCATIONS_QUERY,
            variable_values={"first": 5, "after": string_cursor("Harbor")},
        )

        assert result.errors
        assert "offset" in result.errors[0].message


class TestKeyedConnectionQuery:
    """Test the key-based connection end to end."""

    def test_page_after_key(self, schema, string_cursor):
        result = schema.execute_sync(
            LOCATIONS_BY_NAME_QUERY,
            variable_values={"first": 2, "after": string_cursor("Harbor")},
        )

        assert result.errors is None
        data = result.data["locationsByName"]
        assert [edge["node"]["name"] for edge in data["edges"]] == ["Lighthouse", "Market"]
        assert data["edges"][0]["cursor"] == string_cursor("Lighthouse")
        assert data["pageInfo"]["hasNextPage"] is True
        assert data["pageInfo"]["hasPreviousPage"] is True

    def test_walk_until_empty_page(self, schema):
        page_sizes = []
        variables = {"first": 5}

        while True:
            result = schema.execute_sync(LOCATIONS_BY_NAME_QUERY, variable_values=variables)
            assert result.errors is None
            data = result.data["locationsByName"]
            page_sizes.append(len(data["edges"]))
            if not data["pageInfo"]["hasNextPage"]:
                break
            variables = {"first": 5, "after": data["pageInfo"]["endCursor"]}

        assert page_sizes == [5, 5, 3, 0]
        assert data["pageInfo"]["hasPreviousPage"] is True
        assert data["pageInfo"]["startCursor"] is None
        assert data["pageInfo"]["endCursor"] is None


class TestCursorScalars:
    def test_serializes_cursor_results(self, schema):
        result = schema.execute_sync("{ lastCursor }")

        assert result.errors is None
        assert result.data["lastCursor"] == OffsetCursor(offset=12).to_encoded_string()

    def test_parses_string_cursor_argument(self, schema, string_cursor):
        result = schema.execute_sync(
            "query Echo($cursor: StringCursor!) { echoKey(cursor: $cursor) }",
            variable_values={"cursor": string_cursor("some||key")},
        )

        assert result.errors is None
        assert result.data["echoKey"] == "some||key"


class TestPageRequestInputQuery:
    def test_page_input(self, schema):
        after = OffsetCursor(offset=4).to_encoded_string()

        result = schema.execute_sync(
            LOCATION_PAGE_QUERY,
            variable_values={"page": {"first": 2, "after": after}},
        )

        assert result.errors is None
        data = result.data["locationPage"]
        assert [edge["node"]["name"] for edge in data["edges"]] == ["Quarry", "Abbey"]
        assert data["pageInfo"]["hasPreviousPage"] is True
