"""In-memory implementation of AuditStore."""

from itertools import count
from uuid import UUID

from scribe.audit.models import AuditEntry
from scribe.audit.store import AuditStore
from scribe.db.errors import ConflictError


class InMemoryAuditStore(AuditStore):
    """In-memory AuditStore for testing and development.

    Entries live in a single list; queries are linear scans. Entries are
    deep-copied on the way in and out, so neither the writer nor any reader
    holds a reference into stored payloads.
    """

    def __init__(self) -> None:
        self._entries: list[AuditEntry] = []
        self._ids: set[UUID] = set()
        self._seq = count(1)

    async def append(self, entry: AuditEntry) -> AuditEntry:
        if entry.id in self._ids:
            raise ConflictError(f"Audit entry {entry.id} already exists")
        stored = entry.model_copy(update={"seq": next(self._seq)}, deep=True)
        self._entries.append(stored)
        self._ids.add(stored.id)
        return stored.model_copy(deep=True)

    async def get_entry(self, entry_id: UUID) -> AuditEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry.model_copy(deep=True)
        return None

    async def list_entries(
        self,
        subject_type: str,
        subject_id: str,
    ) -> list[AuditEntry]:
        results = [
            entry.model_copy(deep=True) for entry in self._entries
            if entry.subject_type == subject_type and entry.subject_id == subject_id
        ]
        results.sort(key=lambda x: x.sort_key)
        return results

    async def count_entries(self, subject_type: str, subject_id: str) -> int:
        return sum(
            1 for entry in self._entries
            if entry.subject_type == subject_type and entry.subject_id == subject_id
        )
