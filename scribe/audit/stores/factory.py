"""Select an AuditStore implementation from configuration."""

from scribe.audit.store import AuditStore
from scribe.audit.stores.inmemory import InMemoryAuditStore
from scribe.audit.stores.postgres import PostgresAuditStore
from scribe.config.models.storage import AuditStoreConfig
from scribe.db.pool import PostgresPool
from scribe.observability.logging import get_logger

logger = get_logger(__name__)


def create_audit_store(
    config: AuditStoreConfig,
    pool: PostgresPool | None = None,
) -> AuditStore:
    """Create the configured audit store.

    For the postgres backend a pool is built from ``config`` unless one is
    passed in. The pool connects lazily on first use.

    Raises:
        ValueError: If the backend is not supported
    """
    if config.backend == "inmemory":
        logger.info("audit_store_created", backend="inmemory")
        return InMemoryAuditStore()

    if config.backend == "postgres":
        if pool is None:
            pool = PostgresPool.from_config(config)
        logger.info("audit_store_created", backend="postgres", table=config.table_name)
        return PostgresAuditStore(pool, table_name=config.table_name)

    raise ValueError(f"Unsupported audit store backend: {config.backend}")
