"""Audit entry stores."""

from scribe.audit.store import AuditStore
from scribe.audit.stores.factory import create_audit_store
from scribe.audit.stores.inmemory import InMemoryAuditStore
from scribe.audit.stores.postgres import PostgresAuditStore

__all__ = [
    "AuditStore",
    "InMemoryAuditStore",
    "PostgresAuditStore",
    "create_audit_store",
]
