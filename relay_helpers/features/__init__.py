"""API-facing features built on the pagination core."""
