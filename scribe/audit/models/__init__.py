"""Audit domain models.

- AuditEntry: immutable snapshot of a subject
- FieldChange / HistoryRow: display-side differences between snapshots
"""

from scribe.audit.models.change import ABSENT, FieldChange, HistoryRow
from scribe.audit.models.entry import AuditAction, AuditEntry, utc_now

__all__ = [
    "ABSENT",
    "AuditAction",
    "AuditEntry",
    "FieldChange",
    "HistoryRow",
    "utc_now",
]
