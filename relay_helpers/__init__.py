"""
relay_helpers - Relay cursor connection helpers for GraphQL APIs.

Import path convention::

    from relay_helpers.core.pagination import OffsetCursorProvider, build_connection
    from relay_helpers.core.exceptions import CursorError
    from relay_helpers.features.graphql.types import create_connection
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
