"""Observability configuration."""

from typing import Literal

from pydantic import BaseModel, Field


class ObservabilityConfig(BaseModel):
    """Logging output settings."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Minimum log level"
    )
    log_format: Literal["json", "console"] = Field(
        default="json", description="Renderer for log events"
    )
    redact_pii: bool = Field(default=True, description="Mask sensitive values in logs")
