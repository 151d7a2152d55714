"""structlog setup for applications embedding the Sift client.

The client only emits debug-level request lifecycle events
(``sift_request_sent``, ``sift_response_received``, ...) under the
``sift_client`` logger.  Credentials and signatures are never included.
httpx logs full request URLs, query string signatures included, so its
loggers are held at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "sift_client"
_QUIET_LOGGERS = ("httpx", "httpcore")


def _is_sift_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "_sift_client", False)


def setup_logging(
    *,
    json: bool = True,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route the client's structlog events to *stream* (stdout by default).

    Only the ``sift_client`` logger gets a handler; handlers the embedding
    application installed elsewhere are left alone.  structlog is configured
    only if the application has not configured it already.  Calling this
    again replaces the handler from the previous call.

    Parameters
    ----------
    json:
        If *True* (the default), output JSON lines.  If *False*, use a
        human-friendly console renderer.
    level:
        Level name for the ``sift_client`` logger (``"DEBUG"`` shows request
        events).
    """
    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_log_level,
                structlog.stdlib.add_logger_name,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    if json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    handler._sift_client = True  # type: ignore[attr-defined]

    sift_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in sift_logger.handlers if _is_sift_handler(h)]:
        sift_logger.removeHandler(existing)
    sift_logger.addHandler(handler)
    sift_logger.setLevel(level.upper())
    sift_logger.propagate = False

    for name in _QUIET_LOGGERS:
        quiet = logging.getLogger(name)
        if quiet.getEffectiveLevel() < logging.WARNING:
            quiet.setLevel(logging.WARNING)

    return handler
