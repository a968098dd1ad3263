"""Shared infrastructure: configuration-driven database access, logging, errors."""
