"""Field-level differences between two audit snapshots."""

from collections.abc import Mapping
from typing import Any

from scribe.audit.models import ABSENT, AuditEntry, FieldChange


def _as_payload(value: Mapping[str, Any] | AuditEntry | None, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if isinstance(value, AuditEntry):
        return value.payload
    if not isinstance(value, Mapping):
        raise TypeError(
            f"{name} must be a mapping or AuditEntry, got {type(value).__name__}"
        )
    return value


def delta(
    previous: Mapping[str, Any] | AuditEntry | None,
    current: Mapping[str, Any] | AuditEntry,
) -> list[FieldChange]:
    """Compare two snapshots field by field.

    Fields are visited in ``current`` order, then any left over from
    ``previous``. A key missing on one side reads as ABSENT. Only fields whose
    values differ under ``==`` are returned; strings are compared whole.

    ``previous`` is None for the first entry of a subject, in which case every
    field of ``current`` is reported as added.

    Raises:
        TypeError: If either argument is not a mapping, entry or (for
            ``previous``) None
    """
    if current is None:
        raise TypeError("current must be a mapping or AuditEntry, got NoneType")
    before = _as_payload(previous, "previous")
    after = _as_payload(current, "current")

    fields = list(after)
    fields.extend(key for key in before if key not in after)

    changes = []
    for field in fields:
        previous_value = before.get(field, ABSENT)
        current_value = after.get(field, ABSENT)
        if previous_value != current_value:
            changes.append(
                FieldChange(
                    field=field,
                    previous_value=previous_value,
                    current_value=current_value,
                )
            )
    return changes
