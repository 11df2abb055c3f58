from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..transport import RedisStreamTransport, SQSTransport
from .completion import CompletionHandler, LoggingCompletion
from .config import DLQSettings, PublisherConfig
from .domain import OutgoingMessage, build_message
from .exceptions import InvalidArgumentsError, InvalidConfigurationError, TransportError
from .loggers import as_logger_provider, resolve_logger

if TYPE_CHECKING:
    from ..transport import QueueTransport


class DLQPublisher:
    """Forwards a failed event, with its error and invocation id, to a dead-letter queue.

    Usage Pattern
    -------------
    ```python
    publisher = DLQPublisher(os.environ["DLQ_URL"], logger=request_logger(__name__))

    async def handler(event, context):
        try:
            return await process(event)
        except Exception as e:
            await publisher.publish(event, context, e)
            raise
    ```

    ``publish`` validates its arguments and builds the message before it
    returns, so malformed calls raise immediately and never reach the
    transport. The returned awaitable performs the single send.
    Publishers that own their transport connections, such as one built by
    ``from_settings`` for Redis, should be closed with ``aclose`` or used as
    an async context manager.
    """

    def __init__(
        self,
        queue_url: str | None,
        *,
        logger: object | None = None,
        transport: QueueTransport | None = None,
    ) -> None:
        if not queue_url:
            raise InvalidConfigurationError("queue_url is a required constructor parameter.")

        try:
            self._config = PublisherConfig(queue_url=queue_url, logger=as_logger_provider(logger))
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid DLQ publisher configuration: {e}") from e

        self._transport = transport if transport is not None else _default_transport()

    async def __aenter__(self) -> DLQPublisher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the transport's connections, if it holds any."""
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    @classmethod
    def from_settings(cls, settings: DLQSettings | None = None, *, logger: object | None = None) -> DLQPublisher:
        """Build a publisher whose destination and transport come from ``DLQ_*`` settings."""
        try:
            actual_settings = settings if settings is not None else DLQSettings()
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid DLQ settings: {e}") from e

        transport: QueueTransport
        if actual_settings.transport == "redis":
            transport = RedisStreamTransport.from_url(actual_settings.redis_url)
        else:
            transport = _default_transport()
        return cls(actual_settings.queue_url, logger=logger, transport=transport)

    @property
    def queue_url(self) -> str:
        return self._config.queue_url

    @property
    def config(self) -> PublisherConfig:
        return self._config

    def publish(
        self,
        event: Any,
        context: Any,
        error: BaseException | None,
        completion: CompletionHandler | None = None,
    ) -> Awaitable[Any]:
        """Send ``event`` to the dead-letter queue.

        Parameters
        ----------
        event : Any
            The payload that failed processing; must be JSON serializable.
        context : Any
            Lambda context (or mapping) carrying ``aws_request_id``.
        error : BaseException
            The failure that triggered dead-lettering.
        completion : CompletionHandler | None
            Receives ``(None, result)`` or ``(error, None)`` and decides the
            outcome. Defaults to logging the outcome and returning the result
            or raising a reported ``TransportError``.

        Returns
        -------
        Awaitable[Any]
            Resolves to the completion handler's result.

        Raises
        ------
        InvalidArgumentsError
            If ``event``, ``context`` or ``error`` is missing.
        SerializationError
            If ``event`` cannot be encoded as JSON.
        """
        if event is None or context is None or error is None:
            raise InvalidArgumentsError("event, context, and error are required parameters.")

        logger = resolve_logger(self._config.logger, context)
        message = build_message(event, context, error, self._config.queue_url)

        if completion is None:
            completion = LoggingCompletion(logger)
        return self._deliver(message, completion)

    async def _deliver(self, message: OutgoingMessage, completion: CompletionHandler) -> Any:
        try:
            result = await self._transport.send(message)
        except Exception as e:
            outcome = completion(TransportError(e), None)
        else:
            outcome = completion(None, result)

        if inspect.isawaitable(outcome):
            return await outcome
        return outcome


def _default_transport() -> SQSTransport:
    try:
        return SQSTransport()
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid DLQ_SQS_* settings: {e}") from e
