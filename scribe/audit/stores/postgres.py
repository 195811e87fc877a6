"""PostgreSQL implementation of AuditStore.

Uses asyncpg for async database access.
"""

import json
from uuid import UUID

import asyncpg

from scribe.audit.models import AuditEntry
from scribe.audit.store import AuditStore
from scribe.db.errors import ConflictError, ConnectionError, ValidationError
from scribe.db.pool import PostgresPool
from scribe.observability.logging import get_logger
from scribe.observability.metrics import STORE_ERRORS

logger = get_logger(__name__)

# payload is JSON rather than JSONB so the snapshot's key order survives
SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS {table} (
    seq BIGSERIAL PRIMARY KEY,
    id UUID NOT NULL UNIQUE,
    subject_type VARCHAR(255) NOT NULL,
    subject_id VARCHAR(255) NOT NULL,
    action VARCHAR(16) NOT NULL CHECK (action IN ('create', 'update', 'destroy')),
    payload JSON NOT NULL,
    actor_id TEXT,
    actor_label TEXT,
    request_id TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
);
CREATE INDEX IF NOT EXISTS idx_{table}_subject
    ON {table} (subject_type, subject_id, created_at, seq);
"""

COLUMNS = (
    "seq, id, subject_type, subject_id, action, payload, "
    "actor_id, actor_label, request_id, created_at"
)


class PostgresAuditStore(AuditStore):
    """PostgreSQL implementation of AuditStore.

    Rows are only ever inserted; ``seq`` comes from a BIGSERIAL column and
    orders entries that share a timestamp.
    """

    def __init__(self, pool: PostgresPool, table_name: str = "audit_entries") -> None:
        """Initialize with connection pool.

        Args:
            pool: PostgreSQL connection pool
            table_name: Table holding audit entries; must be a plain identifier
        """
        self._pool = pool
        self._table = table_name

    async def ensure_schema(self) -> None:
        """Create the entries table and its index if they do not exist."""
        try:
            async with self._pool.acquire() as conn:
                await conn.execute(SCHEMA_SQL.format(table=self._table))
                logger.info("audit_schema_ensured", table=self._table)
        except Exception as e:
            STORE_ERRORS.labels(operation="ensure_schema").inc()
            logger.error("postgres_ensure_schema_error", table=self._table, error=str(e))
            raise ConnectionError(f"Failed to create audit schema: {e}", cause=e) from e

    async def append(self, entry: AuditEntry) -> AuditEntry:
        try:
            async with self._pool.acquire() as conn:
                seq = await conn.fetchval(
                    f"""
                    INSERT INTO {self._table} (
                        id, subject_type, subject_id, action, payload,
                        actor_id, actor_label, request_id, created_at
                    ) VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
                    RETURNING seq
                    """,  # noqa: S608
                    entry.id,
                    entry.subject_type,
                    entry.subject_id,
                    entry.action.value,
                    json.dumps(entry.payload),
                    entry.actor_id,
                    entry.actor_label,
                    entry.request_id,
                    entry.created_at,
                )
        except asyncpg.UniqueViolationError as e:
            STORE_ERRORS.labels(operation="append").inc()
            logger.error("postgres_append_conflict", entry_id=str(entry.id))
            raise ConflictError(f"Audit entry {entry.id} already exists", cause=e) from e
        except Exception as e:
            STORE_ERRORS.labels(operation="append").inc()
            logger.error("postgres_append_error", entry_id=str(entry.id), error=str(e))
            raise ConnectionError(f"Failed to save audit entry: {e}", cause=e) from e

        logger.debug("audit_entry_saved", entry_id=str(entry.id), seq=seq)
        return entry.model_copy(update={"seq": seq})

    async def get_entry(self, entry_id: UUID) -> AuditEntry | None:
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    f"SELECT {COLUMNS} FROM {self._table} WHERE id = $1",  # noqa: S608
                    entry_id,
                )
        except Exception as e:
            STORE_ERRORS.labels(operation="get_entry").inc()
            logger.error("postgres_get_entry_error", entry_id=str(entry_id), error=str(e))
            raise ConnectionError(f"Failed to get audit entry: {e}", cause=e) from e

        if row:
            return self._row_to_entry(row)
        return None

    async def list_entries(
        self,
        subject_type: str,
        subject_id: str,
    ) -> list[AuditEntry]:
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""
                    SELECT {COLUMNS}
                    FROM {self._table}
                    WHERE subject_type = $1 AND subject_id = $2
                    ORDER BY created_at ASC, seq ASC
                    """,  # noqa: S608
                    subject_type,
                    subject_id,
                )
        except Exception as e:
            STORE_ERRORS.labels(operation="list_entries").inc()
            logger.error(
                "postgres_list_entries_error",
                subject_type=subject_type,
                subject_id=subject_id,
                error=str(e),
            )
            raise ConnectionError(f"Failed to list audit entries: {e}", cause=e) from e

        return [self._row_to_entry(row) for row in rows]

    async def count_entries(self, subject_type: str, subject_id: str) -> int:
        try:
            async with self._pool.acquire() as conn:
                return await conn.fetchval(
                    f"""
                    SELECT COUNT(*) FROM {self._table}
                    WHERE subject_type = $1 AND subject_id = $2
                    """,  # noqa: S608
                    subject_type,
                    subject_id,
                )
        except Exception as e:
            STORE_ERRORS.labels(operation="count_entries").inc()
            logger.error(
                "postgres_count_entries_error",
                subject_type=subject_type,
                subject_id=subject_id,
                error=str(e),
            )
            raise ConnectionError(f"Failed to count audit entries: {e}", cause=e) from e

    def _row_to_entry(self, row) -> AuditEntry:
        """Convert database row to AuditEntry model."""
        try:
            return AuditEntry(
                id=row["id"],
                subject_type=row["subject_type"],
                subject_id=row["subject_id"],
                action=row["action"],
                payload=json.loads(row["payload"]),
                actor_id=row["actor_id"],
                actor_label=row["actor_label"],
                request_id=row["request_id"],
                created_at=row["created_at"],
                seq=row["seq"],
            )
        except ValueError as e:
            raise ValidationError(f"Malformed audit row seq={row['seq']}: {e}", cause=e) from e
