"""Test factories for creating test data."""

from tests.factories.audit import AuditEntryFactory

__all__ = [
    "AuditEntryFactory",
]
