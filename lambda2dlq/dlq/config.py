from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, InstanceOf
from pydantic_settings import BaseSettings, SettingsConfigDict

from .loggers import ContextLoggerFactory, StaticLogger


class PublisherConfig(BaseModel):
    """Immutable configuration for one DLQPublisher."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    queue_url: str = Field(
        min_length=1,
        description="Destination queue identifier (SQS queue URL or Redis stream name)",
    )
    logger: InstanceOf[StaticLogger] | InstanceOf[ContextLoggerFactory] | None = Field(
        default=None,
        description="Logger used by the default completion handler; None disables reporting",
    )


class DLQSettings(BaseSettings):
    """Environment-sourced publisher settings (``DLQ_*``).

    Lets a Lambda pick its dead-letter destination from the function's
    environment instead of code.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DLQ_",
        extra="ignore",
        frozen=True,
    )

    queue_url: str = Field(
        min_length=1,
        description="Destination queue identifier",
    )
    transport: Literal["sqs", "redis"] = Field(
        default="sqs",
        description="Queue transport backing the publisher",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL, used when transport is 'redis'",
    )
