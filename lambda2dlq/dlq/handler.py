from __future__ import annotations

from collections.abc import Callable, Coroutine
from functools import wraps
from typing import TYPE_CHECKING, Any

from ..logger import get_logger

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

    from .publisher import DLQPublisher

logger: BoundLogger = get_logger(__name__)

type AsyncHandler[R] = Callable[[Any, Any], Coroutine[object, object, R]]


def dead_letter_on_failure[R](publisher: DLQPublisher) -> Callable[[AsyncHandler[R]], AsyncHandler[R]]:
    """Decorate an async ``(event, context)`` handler so failures land in the DLQ.

    The handler's exception is re-raised after the event is published, leaving
    the host free to apply its own retry or redrive. A failed publish raises
    instead, with the handler's exception as its context.
    """

    def decorator(func: AsyncHandler[R]) -> AsyncHandler[R]:
        @wraps(func)
        async def wrapper(event: Any, context: Any) -> R:
            try:
                return await func(event, context)
            except Exception as e:
                logger.warning(
                    "Handler failed, routing event to DLQ",
                    handler=func.__qualname__,
                    error_type=type(e).__name__,
                    queue_url=publisher.queue_url,
                )
                await publisher.publish(event, context, e)
                raise

        return wrapper

    return decorator
