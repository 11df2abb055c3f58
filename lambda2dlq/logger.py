from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Literal, cast

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from structlog.types import Processor

type BoundLogger = structlog.stdlib.BoundLogger
type LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class LoggingConfig(BaseSettings):
    """Host-side logging setup, read from ``LOG_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LOG_",
        extra="forbid",
        frozen=True,
    )

    level: LogLevel = Field(default="INFO")
    json_output: bool = Field(default=True)
    service_name: str = Field(default="lambda2dlq")
    library_log_levels: dict[str, LogLevel] = Field(
        default_factory=lambda: {"botocore": "WARNING", "aiobotocore": "WARNING"}
    )


def _build_processors(json_output: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        # One JSON object per line, the format CloudWatch Logs Insights parses.
        return [*processors, structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [*processors, structlog.dev.ConsoleRenderer()]


def configure_logging(config: LoggingConfig | None = None) -> BoundLogger:
    """Route structlog through the root stdlib logger on stdout.

    Lambda keeps the process warm between invocations, so call this once at
    import of the handler module, not per event.
    """
    actual_config = config if config is not None else LoggingConfig()

    structlog.configure(
        processors=_build_processors(actual_config.json_output),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(actual_config.level)

    for lib_name, lib_level in actual_config.library_log_levels.items():
        logging.getLogger(lib_name).setLevel(lib_level)

    structlog.contextvars.bind_contextvars(service=actual_config.service_name)
    return get_logger()


def get_logger(name: str | None = None) -> BoundLogger:
    return cast(BoundLogger, structlog.get_logger(name))
