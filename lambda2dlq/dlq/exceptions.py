from __future__ import annotations


class DLQError(Exception):
    """Base class for every error raised by the DLQ publisher."""


class InvalidConfigurationError(DLQError, ValueError):
    """The publisher was constructed without a usable queue or logger."""


class InvalidArgumentsError(DLQError, ValueError):
    """``publish`` was called without an event, context or error."""


class SerializationError(DLQError, TypeError):
    """The failed event could not be encoded as a JSON message body."""


class TransportError(DLQError):
    """The queue transport rejected the send.

    Wraps the transport's own exception in ``cause``. ``reported`` tells callers
    further up the stack that the failure has already been logged, so they do
    not log it a second time.
    """

    def __init__(self, cause: BaseException, *, reported: bool = False) -> None:
        super().__init__(f"Failed to publish event to DLQ: {cause}")
        self.cause = cause
        self.reported = reported

    def mark_reported(self) -> TransportError:
        """Return a copy flagged as already reported; ``self`` is left untouched."""
        return TransportError(self.cause, reported=True)
