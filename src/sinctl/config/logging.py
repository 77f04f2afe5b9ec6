"""Log setup for the sinctl CLI.

Services log key-value events (``op``, ``token``, ``kind``, ...) through
structlog bound to stdlib loggers under ``sinctl``. Everything is written
to stderr so stdout carries only command results.

- Human (default): console renderer, colored when stderr is a TTY
- ``--log-json``: one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

LOGGER_NAME = "sinctl"


def _annotators() -> list[Processor]:
    """Fields added to both structlog events and plain stdlib records."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route sinctl events to a single stderr handler.

    Safe to call repeatedly; each call replaces the root handler.

    Args:
        verbose: Emit DEBUG events from ``sinctl`` loggers.
        log_json: Render JSON lines instead of console text.
    """
    annotators = _annotators()

    # Level filtering runs first so suppressed debug events skip the chain.
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *annotators,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=annotators,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
