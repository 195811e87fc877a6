"""Immutable change history for host records.

The host hands serialized snapshots to AuditRecorder on create, update and
destroy; entries are appended to an AuditStore and never modified. History
views pair each entry with the field changes since the one before it.
"""

from scribe.audit.blank import is_blank
from scribe.audit.context import AuditContext
from scribe.audit.delta import delta
from scribe.audit.errors import AuditError, UnregisteredSubjectError
from scribe.audit.models import (
    ABSENT,
    AuditAction,
    AuditEntry,
    FieldChange,
    HistoryRow,
)
from scribe.audit.recorder import AuditRecorder
from scribe.audit.registry import AuditedType, AuditRegistry
from scribe.audit.snapshot import ModelSnapshotter, SnapshotProvider

__all__ = [
    "ABSENT",
    "AuditAction",
    "AuditContext",
    "AuditEntry",
    "AuditError",
    "AuditRecorder",
    "AuditRegistry",
    "AuditedType",
    "FieldChange",
    "HistoryRow",
    "ModelSnapshotter",
    "SnapshotProvider",
    "UnregisteredSubjectError",
    "delta",
    "is_blank",
]
