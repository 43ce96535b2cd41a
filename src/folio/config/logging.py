"""structlog configuration for folio.

Stdlib loggers under ``folio.*`` are routed through structlog's
ProcessorFormatter, so modules keep using ``logging.getLogger(__name__)``.
Output goes to stderr as colored console lines, or JSON lines with
``--log-json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers that are chatty at DEBUG.
_QUIET_LOGGERS = ("MARKDOWN", "markdown", "jinja2")


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install a single stderr handler and set the folio log level.

    Args:
        verbose: DEBUG for ``folio`` loggers; WARNING otherwise.
        log_json: Render JSON lines instead of console output.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("folio").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
