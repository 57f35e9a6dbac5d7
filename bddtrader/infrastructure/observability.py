'''
Structured logging configuration for the BDDTrader ledger.

Ledger modules log through the stdlib logging module. configure_logging()
renders those records as orjson JSON lines with ISO 8601 UTC timestamps
and merges any fields bound with bound_context(). Call it once at
process startup.
'''

from __future__ import annotations

import logging
import sys
from typing import Any, ContextManager, TextIO

import orjson
import structlog

__all__ = ['bound_context', 'configure_logging']


def _orjson_dumps_str(*args: Any, **kwargs: Any) -> str:

    '''
    Serialize to JSON string via orjson for stdlib ProcessorFormatter.

    Returns:
        str: JSON-encoded string
    '''

    return orjson.dumps(*args, **kwargs).decode()


def configure_logging(log_level: str = 'INFO', stream: TextIO | None = None) -> None:

    '''
    Route stdlib and structlog records through one JSON handler.

    Args:
        log_level (str): Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream (TextIO | None): Destination for JSON lines, stdout when None

    Returns:
        None
    '''

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(serializer=_orjson_dumps_str),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)


def bound_context(**fields: Any) -> ContextManager[None]:

    '''
    Bind fields to every log line emitted inside the with-block.

    Args:
        **fields (Any): Key-value pairs such as client_id

    Returns:
        ContextManager[None]: Restores the previous context on exit
    '''

    return structlog.contextvars.bound_contextvars(**fields)
