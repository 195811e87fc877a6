"""Scribe: immutable change history for host application records."""

__version__ = "0.1.0"
