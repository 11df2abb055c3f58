from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..dlq.domain import OutgoingMessage


class QueueTransport(Protocol):
    """Delivers one message to a queue.

    Retries, authentication and timeouts are the transport's business; the
    publisher calls ``send`` once and treats any raised exception as a failed
    delivery.
    """

    async def send(self, message: OutgoingMessage) -> Any: ...
