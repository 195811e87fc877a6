"""Per-unit-of-work audit context.

Host request-setup code builds one AuditContext for the acting user and
hands it to every audited call in that unit of work. Nothing is stored at
module level, so concurrent requests cannot see each other's actor.
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class AuditContext(BaseModel):
    """Who is acting, and in which unit of work."""

    model_config = ConfigDict(frozen=True)

    actor_id: str | None = Field(default=None, description="Acting user id")
    actor_label: str | None = Field(
        default=None, description="Display name recorded on entries"
    )
    request_id: str = Field(
        default_factory=lambda: str(uuid4()), description="Unit of work id"
    )

    @classmethod
    def anonymous(cls) -> "AuditContext":
        """Context for writes with no acting user (jobs, scripts)."""
        return cls()

    @classmethod
    def for_actor(cls, actor_id: object, label: str | None = None) -> "AuditContext":
        """Context for a user; the label defaults to the id."""
        return cls(actor_id=str(actor_id), actor_label=label or str(actor_id))

    def log_context(self) -> dict[str, str]:
        """Identifiers to bind on log events for this unit of work."""
        bound = {"request_id": self.request_id}
        if self.actor_id is not None:
            bound["actor_id"] = self.actor_id
        return bound
