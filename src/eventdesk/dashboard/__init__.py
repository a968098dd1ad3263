"""Per-user summary statistics."""
