from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, cast

import structlog

from ..logger import get_logger
from .domain import invocation_id
from .exceptions import InvalidConfigurationError


class DLQLogger(Protocol):
    """Anything that reports structured events the way structlog does."""

    def info(self, event: str, *args: Any, **kwargs: Any) -> Any: ...

    def error(self, event: str, *args: Any, **kwargs: Any) -> Any: ...


@dataclass(frozen=True, slots=True)
class StaticLogger:
    """A ready logger shared by every invocation."""

    logger: DLQLogger


@dataclass(frozen=True, slots=True)
class ContextLoggerFactory:
    """Builds the logger for one invocation from its execution context."""

    factory: Callable[[Any], DLQLogger]


type LoggerProvider = StaticLogger | ContextLoggerFactory


def as_logger_provider(value: object) -> LoggerProvider | None:
    """Classify a user-supplied logger option once, at publisher construction.

    Classes are factories: ``RequestLogger(context)`` builds a logger per
    invocation even though the class itself exposes ``info`` and ``error``.
    Stdlib loggers are wrapped in structlog so the keyword-style events the
    completion emits render into the message instead of being rejected.

    Raises
    ------
    InvalidConfigurationError
        If ``value`` is neither a logger nor a callable returning one.
    """
    if value is None or isinstance(value, StaticLogger | ContextLoggerFactory):
        return value
    if isinstance(value, type):
        return ContextLoggerFactory(value)
    if isinstance(value, logging.Logger | logging.LoggerAdapter):
        return StaticLogger(cast(DLQLogger, structlog.wrap_logger(value)))
    if hasattr(value, "info") and hasattr(value, "error"):
        return StaticLogger(cast(DLQLogger, value))
    if callable(value):
        return ContextLoggerFactory(value)
    raise InvalidConfigurationError(
        f"logger must be a logger or a callable returning one, got {type(value).__name__}."
    )


def resolve_logger(provider: LoggerProvider | None, context: Any) -> DLQLogger | None:
    match provider:
        case StaticLogger(logger=logger):
            return logger
        case ContextLoggerFactory(factory=factory):
            return factory(context)
        case _:
            return None


def request_logger(name: str | None = None) -> ContextLoggerFactory:
    """Logger factory binding each invocation's request id onto a structlog logger."""

    def factory(context: Any) -> DLQLogger:
        return get_logger(name).bind(aws_request_id=invocation_id(context))

    return ContextLoggerFactory(factory)
