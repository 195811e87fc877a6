"""Configuration section models."""

from scribe.config.models.audit import AuditConfig
from scribe.config.models.observability import ObservabilityConfig
from scribe.config.models.storage import AuditStoreConfig, StorageConfig

__all__ = [
    "AuditConfig",
    "AuditStoreConfig",
    "ObservabilityConfig",
    "StorageConfig",
]
