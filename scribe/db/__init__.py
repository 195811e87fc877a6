"""Database utilities for Scribe.

This module contains:
- Connection pool management
- Store error hierarchy
"""

from scribe.db.errors import (
    ConflictError,
    ConnectionError,
    StoreError,
    ValidationError,
)

__all__ = [
    "StoreError",
    "ConnectionError",
    "ConflictError",
    "ValidationError",
]
