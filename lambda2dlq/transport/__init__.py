from __future__ import annotations

from .base import QueueTransport
from .redis_streams import RedisStreamConfig, RedisStreamTransport
from .sqs import SQSTransport, SQSTransportConfig

__all__ = [
    "QueueTransport",
    "RedisStreamConfig",
    "RedisStreamTransport",
    "SQSTransport",
    "SQSTransportConfig",
]
