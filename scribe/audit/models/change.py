"""Field-level change models produced by the delta computation."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from scribe.audit.models.entry import AuditEntry


class _Absent(Enum):
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT
"""Marks a field missing from a snapshot; distinct from a stored ``None``."""


class FieldChange(BaseModel):
    """One field whose value differs between two consecutive snapshots."""

    model_config = ConfigDict(frozen=True)

    field: str
    previous_value: Any
    current_value: Any

    @property
    def is_addition(self) -> bool:
        return self.previous_value is ABSENT

    @property
    def is_removal(self) -> bool:
        return self.current_value is ABSENT


class HistoryRow(BaseModel):
    """An entry paired with what changed since the entry before it."""

    model_config = ConfigDict(frozen=True)

    entry: AuditEntry
    changes: list[FieldChange] = Field(default_factory=list)
