"""GraphQL surface for Relay pagination using Strawberry.

Provides:
- PageInfo, Edge and Connection types generated per node type
- Cursor scalars that parse and serialize opaque cursors
- An input type for the ``first`` / ``after`` arguments
"""
