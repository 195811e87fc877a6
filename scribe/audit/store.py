"""AuditStore abstract interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from scribe.audit.models import AuditEntry


class AuditStore(ABC):
    """Append-only storage for audit entries.

    Entries are never updated or deleted once appended. Listings are ordered
    by ``created_at`` with ties broken by insertion sequence.
    """

    @abstractmethod
    async def append(self, entry: AuditEntry) -> AuditEntry:
        """Append an entry; returns it with ``seq`` assigned."""
        pass

    @abstractmethod
    async def get_entry(self, entry_id: UUID) -> AuditEntry | None:
        """Get an entry by ID."""
        pass

    @abstractmethod
    async def list_entries(
        self,
        subject_type: str,
        subject_id: str,
    ) -> list[AuditEntry]:
        """List a subject's entries in chronological order."""
        pass

    @abstractmethod
    async def count_entries(self, subject_type: str, subject_id: str) -> int:
        """Count a subject's entries."""
        pass
