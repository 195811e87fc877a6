"""Storage backend configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

AuditBackendType = Literal["inmemory", "postgres"]


class AuditStoreConfig(BaseModel):
    """Configuration for the audit entry store."""

    backend: AuditBackendType = Field(
        default="inmemory",
        description="Backend type",
    )
    connection_url: str | None = Field(
        default=None,
        description="PostgreSQL DSN; falls back to SCRIBE_DATABASE_URL/DATABASE_URL",
    )
    min_pool_size: int = Field(
        default=2,
        gt=0,
        description="Minimum connections to keep open",
    )
    max_pool_size: int = Field(
        default=10,
        gt=0,
        description="Maximum connections in pool",
    )
    max_inactive_connection_lifetime: float = Field(
        default=300.0,
        gt=0,
        description="Close connections idle longer than this (seconds)",
    )
    command_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Default timeout for queries (seconds)",
    )
    table_name: str = Field(
        default="audit_entries",
        pattern=r"^[a-z_][a-z0-9_]*$",
        description="Table holding audit entries",
    )


class StorageConfig(BaseModel):
    """Storage configuration for all stores."""

    audit: AuditStoreConfig = Field(default_factory=AuditStoreConfig)
