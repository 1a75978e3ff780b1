"""GraphQL test suite."""
