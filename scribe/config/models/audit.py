"""Audit behaviour configuration."""

from pydantic import BaseModel, Field


class AuditConfig(BaseModel):
    """Controls which writes happen and how default snapshots are built."""

    enabled: bool = Field(
        default=True,
        description="When false, record() suppresses every write",
    )
    default_exclude: list[str] = Field(
        default_factory=lambda: ["created_at", "updated_at", "lock_version"],
        description="Field names left out of default snapshots",
    )
