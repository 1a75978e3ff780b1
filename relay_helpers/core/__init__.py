"""Framework independent core: cursors, pagination schemas, providers and settings."""
