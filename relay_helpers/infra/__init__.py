"""Infrastructure support (logging)."""
