"""Build a ready-to-use AuditRecorder from configuration.

Example usage:

    from scribe.audit import AuditContext
    from scribe.bootstrap import bootstrap

    recorder = bootstrap()
    ctx = AuditContext.for_actor(user.id, user.name)
    await recorder.record("Invoice", invoice.id, "update", payload, ctx)
"""

from scribe.audit.recorder import AuditRecorder
from scribe.audit.registry import AuditRegistry
from scribe.audit.stores.factory import create_audit_store
from scribe.config import Settings, get_settings
from scribe.db.pool import PostgresPool
from scribe.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def bootstrap(
    settings: Settings | None = None,
    *,
    pool: PostgresPool | None = None,
    configure_logging: bool = True,
) -> AuditRecorder:
    """Create a recorder with the configured store and registry.

    Args:
        settings: Settings to use; loaded via get_settings() when None
        pool: Existing PostgreSQL pool to share with the host
        configure_logging: Whether to call setup_logging() from settings

    Returns:
        AuditRecorder backed by the configured store. For PostgreSQL, call
        ``ensure_schema()`` on the store once before the first write if the
        host does not manage the table itself.
    """
    settings = settings or get_settings()

    if configure_logging:
        setup_logging(
            level=settings.observability.log_level,
            format=settings.observability.log_format,
            redact_pii=settings.observability.redact_pii,
        )

    store = create_audit_store(settings.storage.audit, pool=pool)
    registry = AuditRegistry(default_exclude=settings.audit.default_exclude)

    logger.info(
        "scribe_bootstrapped",
        backend=settings.storage.audit.backend,
        enabled=settings.audit.enabled,
    )
    return AuditRecorder(store, registry, enabled=settings.audit.enabled)
