"""Prometheus metrics for audit recording."""

from prometheus_client import Counter

ENTRIES_RECORDED = Counter(
    "scribe_audit_entries_recorded_total",
    "Audit entries appended to the store",
    labelnames=["subject_type", "action"],
)

ENTRIES_SUPPRESSED = Counter(
    "scribe_audit_entries_suppressed_total",
    "Audit writes skipped because the snapshot was blank",
    labelnames=["subject_type", "action"],
)

STORE_ERRORS = Counter(
    "scribe_audit_store_errors_total",
    "Audit store operations that raised",
    labelnames=["operation"],
)
