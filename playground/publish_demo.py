"""
DLQ Publisher Usage Example
===========================

Walks through the publisher's paths against a local Redis stream:
1. Publishing a failed event with the default completion (logs + returns)
2. Publishing with a custom completion handler
3. A decorated handler that dead-letters on failure
4. A transport failure surfacing as a reported TransportError

Prerequisites: Redis Setup
--------------------------
    docker run -d --name redis -p 6379:6379 redis:7-alpine

Inspect DLQ Data
----------------
    # Read entries from the stream
    redis-cli XRANGE demo:dlq - + COUNT 5

    # Get stream length
    redis-cli XLEN demo:dlq

Running This Example
--------------------
    uv run python playground/publish_demo.py

To target SQS instead, start LocalStack, create a queue and run with
``DLQ_SQS_ENDPOINT_URL=http://localhost:4566`` and ``DLQ_TRANSPORT=sqs``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.panel import Panel

from lambda2dlq import DLQPublisher, TransportError, dead_letter_on_failure, request_logger
from lambda2dlq.logger import LoggingConfig, configure_logging
from lambda2dlq.transport import RedisStreamTransport

console = Console()

STREAM = "demo:dlq"


@dataclass
class FakeLambdaContext:
    """Stand-in for the context object Lambda passes to handlers."""

    aws_request_id: str
    function_name: str = "orders-consumer"


class BrokenTransport:
    async def send(self, message: Any) -> Any:
        raise ConnectionError("queue endpoint unreachable")


async def main() -> None:
    configure_logging(LoggingConfig(json_output=False, level="DEBUG"))
    console.print(Panel("[bold cyan]DLQ Publisher Demo Starting[/bold cyan]", expand=False))

    transport = RedisStreamTransport.from_url("redis://localhost:6379/0")
    publisher = DLQPublisher(STREAM, logger=request_logger("demo"), transport=transport)

    console.print("\n[bold]1. Publishing with the default completion...[/bold]")
    try:
        raise ValueError("order total is negative")
    except ValueError as e:
        stream_id = await publisher.publish({"order_id": 42}, FakeLambdaContext("req-0001"), e)
    console.print(f"  [green]✓[/green] Stored as {stream_id}")

    console.print("\n[bold]2. Publishing with a custom completion...[/bold]")

    def summarize(error: TransportError | None, result: Any | None) -> dict[str, Any]:
        return {"ok": error is None, "stream_id": result}

    summary = await publisher.publish(
        {"order_id": 43}, {"aws_request_id": "req-0002"}, KeyError("sku"), summarize
    )
    console.print(f"  [green]✓[/green] Completion returned {summary}")

    console.print("\n[bold]3. Decorated handler...[/bold]")

    @dead_letter_on_failure(publisher)
    async def handler(event: dict[str, Any], context: FakeLambdaContext) -> None:
        raise RuntimeError(f"cannot process order {event['order_id']}")

    try:
        await handler({"order_id": 44}, FakeLambdaContext("req-0003"))
    except RuntimeError as e:
        console.print(f"  [yellow]→[/yellow] Handler error re-raised after dead-lettering: {e}")

    console.print("\n[bold]4. Transport failure...[/bold]")
    failing = DLQPublisher(STREAM, logger=request_logger("demo"), transport=BrokenTransport())
    try:
        await failing.publish({"order_id": 45}, FakeLambdaContext("req-0004"), ValueError("boom"))
    except TransportError as e:
        console.print(f"  [red]✗[/red] {e} (reported={e.reported})")

    await publisher.aclose()
    console.print(Panel("[bold green]DLQ Publisher Demo Complete[/bold green]", expand=False))


if __name__ == "__main__":
    asyncio.run(main())
