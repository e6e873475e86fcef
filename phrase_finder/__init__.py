"""Wildcard phrase lookup over category and tier scoped word banks."""

__version__ = "0.1.0"
