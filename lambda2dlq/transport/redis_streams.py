from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from redis.asyncio import Redis

from ..logger import get_logger

if TYPE_CHECKING:
    from redis.typing import EncodableT, FieldT
    from structlog.stdlib import BoundLogger

    from ..dlq.domain import OutgoingMessage

logger: BoundLogger = get_logger(__name__)


class RedisStreamConfig(BaseModel):
    """Settings for dead-lettering into Redis Streams."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    body_field: str = Field(
        default="body",
        min_length=1,
        description="Stream field holding the serialized event",
    )
    max_stream_length: int = Field(
        default=100_000,
        ge=1000,
        description="Maximum entries in stream (older entries trimmed)",
    )


class RedisStreamTransport:
    """Appends dead-lettered events to a Redis stream named by the destination.

    Each entry carries the body under ``body_field`` and every message
    attribute as its own field, so ``XRANGE`` output reads like the SQS
    message attributes.
    """

    def __init__(self, client: Redis, config: RedisStreamConfig | None = None, *, owns_client: bool = False) -> None:
        self._client = client
        self._config = config or RedisStreamConfig()
        self._owns_client = owns_client

    @classmethod
    def from_url(cls, url: str, config: RedisStreamConfig | None = None) -> RedisStreamTransport:
        return cls(Redis.from_url(url), config, owns_client=True)

    async def send(self, message: OutgoingMessage) -> str:
        fields: dict[FieldT, EncodableT] = {self._config.body_field: message.body}
        fields.update(message.attributes)

        stream_id_raw = await self._client.xadd(
            name=message.destination,
            fields=fields,
            maxlen=self._config.max_stream_length,
        )
        stream_id = stream_id_raw.decode() if isinstance(stream_id_raw, bytes) else str(stream_id_raw)

        logger.debug("Appended message to DLQ stream", stream=message.destination, stream_id=stream_id)
        return stream_id

    async def aclose(self) -> None:
        """Close the Redis client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()
