"""AuditRecorder: the entry point hosts call on create/update/destroy."""

import copy
from collections.abc import Mapping
from typing import Any

import structlog

from scribe.audit.blank import is_blank
from scribe.audit.context import AuditContext
from scribe.audit.delta import delta
from scribe.audit.models import AuditAction, AuditEntry, HistoryRow
from scribe.audit.registry import AuditRegistry
from scribe.audit.store import AuditStore
from scribe.observability.logging import get_logger
from scribe.observability.metrics import ENTRIES_RECORDED, ENTRIES_SUPPRESSED

logger = get_logger(__name__)


class AuditRecorder:
    """Writes audit entries and reads a subject's history back.

    Hosts call record() (or record_subject() for registered types) after
    each lifecycle event, awaiting it before the event completes. Store
    failures propagate unchanged; nothing is retried.
    """

    def __init__(
        self,
        store: AuditStore,
        registry: AuditRegistry | None = None,
        *,
        enabled: bool = True,
    ) -> None:
        self._store = store
        self._registry = registry or AuditRegistry()
        self._enabled = enabled

    @property
    def store(self) -> AuditStore:
        return self._store

    @property
    def registry(self) -> AuditRegistry:
        return self._registry

    async def record(
        self,
        subject_type: str,
        subject_id: object,
        action: AuditAction | str,
        payload: Mapping[str, Any],
        context: AuditContext | None = None,
    ) -> AuditEntry | None:
        """Append an entry for the subject unless the payload is blank.

        Args:
            subject_type: Name of the audited record type
            subject_id: Identifier of the audited record (stringified)
            action: create, update or destroy
            payload: Already-serialized field snapshot
            context: Acting user for this unit of work; anonymous when None

        Returns:
            The stored entry, or None when the write was suppressed
        """
        if not isinstance(payload, Mapping):
            raise TypeError(f"payload must be a mapping, got {type(payload).__name__}")

        action = AuditAction(action)
        context = context or AuditContext.anonymous()
        subject_id = str(subject_id)

        with structlog.contextvars.bound_contextvars(**context.log_context()):
            if not self._enabled or is_blank(payload):
                ENTRIES_SUPPRESSED.labels(subject_type=subject_type, action=action.value).inc()
                logger.debug(
                    "audit_entry_suppressed",
                    subject_type=subject_type,
                    subject_id=subject_id,
                    action=action.value,
                    enabled=self._enabled,
                )
                return None

            entry = AuditEntry(
                subject_type=subject_type,
                subject_id=subject_id,
                action=action,
                payload=copy.deepcopy(dict(payload)),
                actor_id=context.actor_id,
                actor_label=context.actor_label,
                request_id=context.request_id,
            )
            stored = await self._store.append(entry)

            ENTRIES_RECORDED.labels(subject_type=subject_type, action=action.value).inc()
            logger.info(
                "audit_entry_recorded",
                entry_id=str(stored.id),
                subject_type=subject_type,
                subject_id=subject_id,
                action=action.value,
                fields=len(stored.payload),
            )
            return stored

    async def record_subject(
        self,
        subject: Any,
        action: AuditAction | str,
        context: AuditContext | None = None,
    ) -> AuditEntry | None:
        """Snapshot a registered host object and record it.

        Raises:
            UnregisteredSubjectError: If the subject's type was never registered
        """
        audited = self._registry.lookup(subject)
        return await self.record(
            audited.name,
            audited.subject_id(subject),
            action,
            audited.provider(subject),
            context,
        )

    async def list_for(self, subject_type: str, subject_id: object) -> list[AuditEntry]:
        """A subject's entries, oldest first."""
        return await self._store.list_entries(subject_type, str(subject_id))

    async def history(
        self,
        subject_type: str,
        subject_id: object,
        *,
        newest_first: bool = False,
    ) -> list[HistoryRow]:
        """Pair each entry with the changes since the entry before it.

        The first entry is diffed against nothing, so all of its fields show
        as added. ``newest_first`` only reverses the returned rows.
        """
        entries = await self.list_for(subject_type, subject_id)
        rows = []
        previous: AuditEntry | None = None
        for entry in entries:
            rows.append(HistoryRow(entry=entry, changes=delta(previous, entry)))
            previous = entry
        if newest_first:
            rows.reverse()
        return rows
