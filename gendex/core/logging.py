"""
Structured logging configuration for gendex.

structlog events are handed to the standard library root logger, whose single
handler writes to stderr: a RichHandler when a human is watching, plain JSON lines
when a build system captures the stream. Stdout is never written to.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import Config

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.StackInfoRenderer(),
]

# Rich draws its own time and level columns; JSON lines need them inline.
_JSON_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _build_handler(stream: TextIO) -> tuple[logging.Handler, list[structlog.types.Processor]]:
    if stream.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(file=stream),
            show_path=False,
            rich_tracebacks=True,
        )
        pre_chain = list(_PRE_CHAIN)
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(colors=False)
    else:
        handler = logging.StreamHandler(stream)
        pre_chain = _PRE_CHAIN + _JSON_CHAIN
        renderer = structlog.processors.JSONRenderer()

    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                renderer,
            ],
        )
    )
    return handler, pre_chain


def setup_logging(config: Config | None = None, stream: TextIO | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        config: Optional configuration. If None, uses INFO level.
        stream: Destination; defaults to the current ``sys.stderr``.
    """
    log_level = config.log_level if config else "INFO"
    level = getattr(logging, log_level, logging.INFO)
    handler, pre_chain = _build_handler(stream or sys.stderr)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log entries in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
