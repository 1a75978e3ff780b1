"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: isolate cached settings between tests
    - Data Fixtures: sample nodes for building connections
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import pytest

from relay_helpers.core.settings import clear_all_caches

# Keep local .env files and developer shells from leaking into tests
os.environ.setdefault("PAGINATION_DEFAULT_PAGE_SIZE", "50")
os.environ.setdefault("PAGINATION_MAX_PAGE_SIZE", "100")
os.environ.setdefault("LOG_LEVEL", "INFO")


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Clear the LRU-cached settings before and after every test."""
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Data Fixtures
# ============================================================================


@dataclass(frozen=True)
class Location:
    """A minimal node keyed by its name."""

    id: str
    name: str

    def cursor_key(self) -> str:
        return self.name


LOCATION_NAMES = [
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


@pytest.fixture
def locations() -> list[Location]:
    """Thirteen locations, in the order a store would return them."""
    return [Location(id=str(index), name=name) for index, name in enumerate(LOCATION_NAMES)]


@pytest.fixture
def location_factory():
    """Build a single location.

    Example:
        def test_something(location_factory):
            location = location_factory("id-1")
    """

    def _create(name: str) -> Location:
        return Location(id=name, name=name)

    return _create
