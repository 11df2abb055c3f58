"""Route failed Lambda events to a dead-letter queue."""

from __future__ import annotations

from .dlq import (
    DLQError,
    DLQPublisher,
    InvalidArgumentsError,
    InvalidConfigurationError,
    SerializationError,
    TransportError,
    dead_letter_on_failure,
    request_logger,
)

__all__ = [
    "DLQError",
    "DLQPublisher",
    "InvalidArgumentsError",
    "InvalidConfigurationError",
    "SerializationError",
    "TransportError",
    "dead_letter_on_failure",
    "request_logger",
]
