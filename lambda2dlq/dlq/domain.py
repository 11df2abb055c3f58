from __future__ import annotations

import json
import traceback
from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticSerializationError

from .exceptions import InvalidArgumentsError, SerializationError

# Attribute names are part of the wire contract with existing DLQ consumers.
ERROR_MESSAGE_ATTRIBUTE: Final = "err.message"
ERROR_STACK_ATTRIBUTE: Final = "err.stack"
REQUEST_ID_ATTRIBUTE: Final = "context.awsRequestId"

_REQUEST_ID_KEYS: Final = ("aws_request_id", "awsRequestId")


class OutgoingMessage(BaseModel):
    """A single message bound for the dead-letter queue.

    Built fresh for every publish and handed to the transport as-is.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    body: str = Field(
        description="Failed event serialized as JSON",
    )
    destination: str = Field(
        min_length=1,
        description="Queue URL (SQS) or stream name (Redis) to send to",
    )
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="String message attributes describing the failure",
    )


def serialize_event(event: Any) -> str:
    """Encode the failed event as compact JSON.

    Raises
    ------
    SerializationError
        If the event holds values JSON cannot represent or contains a cycle.
    """
    try:
        if isinstance(event, BaseModel):
            return event.model_dump_json()
        return json.dumps(event, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise SerializationError(f"Event of type {type(event).__name__} is not JSON serializable: {e}") from e


def invocation_id(context: Any) -> str:
    """Pull the originating invocation id out of a Lambda context or a mapping.

    Raises
    ------
    InvalidArgumentsError
        If the context carries no request id.
    """
    if isinstance(context, Mapping):
        for key in _REQUEST_ID_KEYS:
            value = context.get(key)
            if value is not None:
                return str(value)
    else:
        value = getattr(context, "aws_request_id", None)
        if value is not None:
            return str(value)

    raise InvalidArgumentsError("context must carry an aws_request_id.")


def error_stack(error: BaseException) -> str:
    # An error that was never raised still yields its "Type: message" line.
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def build_message(event: Any, context: Any, error: BaseException, destination: str) -> OutgoingMessage:
    request_id = invocation_id(context)
    return OutgoingMessage(
        body=serialize_event(event),
        destination=destination,
        attributes={
            ERROR_MESSAGE_ATTRIBUTE: str(error),
            ERROR_STACK_ATTRIBUTE: error_stack(error),
            REQUEST_ID_ATTRIBUTE: request_id,
        },
    )
