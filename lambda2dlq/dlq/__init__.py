from __future__ import annotations

from .completion import CompletionHandler, LoggingCompletion
from .config import DLQSettings, PublisherConfig
from .domain import (
    ERROR_MESSAGE_ATTRIBUTE,
    ERROR_STACK_ATTRIBUTE,
    REQUEST_ID_ATTRIBUTE,
    OutgoingMessage,
)
from .exceptions import (
    DLQError,
    InvalidArgumentsError,
    InvalidConfigurationError,
    SerializationError,
    TransportError,
)
from .handler import dead_letter_on_failure
from .loggers import ContextLoggerFactory, DLQLogger, StaticLogger, request_logger
from .publisher import DLQPublisher

__all__ = [
    "ERROR_MESSAGE_ATTRIBUTE",
    "ERROR_STACK_ATTRIBUTE",
    "REQUEST_ID_ATTRIBUTE",
    "CompletionHandler",
    "ContextLoggerFactory",
    "DLQError",
    "DLQLogger",
    "DLQPublisher",
    "DLQSettings",
    "InvalidArgumentsError",
    "InvalidConfigurationError",
    "LoggingCompletion",
    "OutgoingMessage",
    "PublisherConfig",
    "SerializationError",
    "StaticLogger",
    "TransportError",
    "dead_letter_on_failure",
    "request_logger",
]
