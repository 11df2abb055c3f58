"""Shared fixtures for DLQ publisher unit tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

DLQ_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/orders-dlq"
REQUEST_ID = "00112233445566778899"


@dataclass
class FakeLambdaContext:
    aws_request_id: str
    function_name: str = "orders-consumer"


@pytest.fixture
def dlq_url() -> str:
    return DLQ_URL


@pytest.fixture
def test_event() -> dict[str, Any]:
    return {"data": "test data"}


@pytest.fixture
def test_context() -> dict[str, str]:
    """Context in the shape the Node runtime hands over (camelCase key)."""
    return {"awsRequestId": REQUEST_ID}


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext(aws_request_id=REQUEST_ID)


@pytest.fixture
def test_error() -> ValueError:
    """An error that has been raised, so it carries a traceback."""
    try:
        raise ValueError("horrible error")
    except ValueError as e:
        return e


@pytest.fixture
def send_result() -> dict[str, str]:
    return {"MessageId": "5fea7756-0ea4-451a-a703-a558b933e274", "MD5OfMessageBody": "abc"}


@pytest.fixture
def mock_transport(send_result: dict[str, str]) -> MagicMock:
    transport = MagicMock()
    transport.send = AsyncMock(return_value=send_result)
    return transport


@pytest.fixture
def mock_logger() -> MagicMock:
    logger = MagicMock()
    logger.info = MagicMock()
    logger.error = MagicMock()
    return logger
