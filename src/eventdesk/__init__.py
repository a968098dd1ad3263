"""EventDesk: role-gated event management API for venue operators."""

__version__ = "0.1.0"
