"""AuditEntry model for audit domain."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class AuditAction(str, Enum):
    """Lifecycle event that produced an entry."""

    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


class AuditEntry(BaseModel):
    """Immutable snapshot of a subject at one point in time.

    The subject is referenced by type name and id only, so entries outlive
    the host object they describe.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4, description="Unique identifier")
    subject_type: str = Field(..., min_length=1, description="Audited record type")
    subject_id: str = Field(..., min_length=1, description="Audited record id")
    action: AuditAction = Field(..., description="Lifecycle event")
    payload: dict[str, Any] = Field(..., description="Serialized field snapshot")
    actor_id: str | None = Field(default=None, description="Acting user id")
    actor_label: str | None = Field(
        default=None, description="Display name of the acting user"
    )
    request_id: str | None = Field(
        default=None, description="Unit of work that produced the entry"
    )
    created_at: datetime = Field(default_factory=utc_now, description="Entry time")
    seq: int | None = Field(
        default=None, description="Store-assigned insertion sequence"
    )

    @property
    def sort_key(self) -> tuple[datetime, int]:
        """Chronological position within the subject's history."""
        return (self.created_at, self.seq if self.seq is not None else 0)
