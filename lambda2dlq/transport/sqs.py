"""Amazon SQS transport backed by aioboto3.

Credentials fall back to the standard boto chain (Lambda execution role,
environment, shared config) when none are configured explicitly. Point
``DLQ_SQS_ENDPOINT_URL`` at LocalStack for local runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import aioboto3
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..logger import get_logger

if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger

    from ..dlq.domain import OutgoingMessage

logger: BoundLogger = get_logger(__name__)


class SQSTransportConfig(BaseSettings):
    """SQS client settings, read from ``DLQ_SQS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DLQ_SQS_",
        extra="ignore",
        frozen=True,
    )

    region_name: str | None = Field(default=None, description="AWS region; None uses AWS_REGION")
    endpoint_url: str | None = Field(default=None, description="Override endpoint, e.g. LocalStack")
    aws_access_key_id: str | None = Field(default=None)
    aws_secret_access_key: SecretStr | None = Field(default=None)
    aws_session_token: SecretStr | None = Field(default=None)


def to_send_message_params(message: OutgoingMessage) -> dict[str, Any]:
    """Translate a message into ``SQS.Client.send_message`` keyword arguments.

    Raises
    ------
    ValueError
        If an attribute value is empty; SQS rejects empty String attributes.
    """
    empty = sorted(name for name, value in message.attributes.items() if not value)
    if empty:
        raise ValueError(f"SQS message attributes must not be empty: {', '.join(empty)}")

    return {
        "MessageBody": message.body,
        "QueueUrl": message.destination,
        "MessageAttributes": {
            name: {"DataType": "String", "StringValue": value} for name, value in message.attributes.items()
        },
    }


class SQSTransport:
    """Sends dead-lettered events to an SQS queue, one client per send."""

    def __init__(self, config: SQSTransportConfig | None = None) -> None:
        self._config = config or SQSTransportConfig()

    def _get_session(self) -> aioboto3.Session:
        secret = self._config.aws_secret_access_key
        token = self._config.aws_session_token
        return aioboto3.Session(
            aws_access_key_id=self._config.aws_access_key_id,
            aws_secret_access_key=secret.get_secret_value() if secret else None,
            aws_session_token=token.get_secret_value() if token else None,
            region_name=self._config.region_name,
        )

    async def send(self, message: OutgoingMessage) -> dict[str, Any]:
        params = to_send_message_params(message)
        session = self._get_session()
        async with session.client("sqs", endpoint_url=self._config.endpoint_url) as sqs:
            response: dict[str, Any] = await sqs.send_message(**params)

        logger.debug(
            "Sent message to SQS",
            queue_url=message.destination,
            message_id=response.get("MessageId"),
        )
        return response
