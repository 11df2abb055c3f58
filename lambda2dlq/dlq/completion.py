from __future__ import annotations

from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any, Protocol

from ..logger import get_logger
from .exceptions import TransportError

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

    from .loggers import DLQLogger

logger: BoundLogger = get_logger(__name__)


class CompletionHandler(Protocol):
    """Maps the transport outcome of one publish to the publish result.

    Called exactly once, either as ``(None, result)`` or ``(error, None)``.
    May return a plain value or an awaitable; raising rejects the publish.
    """

    def __call__(self, error: TransportError | None, result: Any | None, /) -> Any | Awaitable[Any]: ...


class LoggingCompletion:
    """Default completion: log the outcome, return the result or raise the error.

    Reporting through the injected logger is best-effort. A logger that is
    missing or itself fails never changes the publish outcome.
    """

    def __init__(self, dlq_logger: DLQLogger | None = None) -> None:
        self._logger = dlq_logger

    def __call__(self, error: TransportError | None, result: Any | None, /) -> Any:
        if error is not None:
            self._report("error", "failed to publish event to DLQ", exc_info=error.cause)
            raise error.mark_reported() from error.cause

        self._report("info", "event published to DLQ", result=result)
        return result

    def _report(self, level: str, event: str, **kwargs: Any) -> None:
        if self._logger is None:
            return
        try:
            getattr(self._logger, level)(event, **kwargs)
        except Exception as e:
            logger.warning("Injected DLQ logger failed", level=level, error=str(e))
