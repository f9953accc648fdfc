"""Structured logging for structprops.

structlog renders the events and the stdlib logging tree routes them, so
host application handlers and pytest's caplog keep working. Until
setup_logging() runs, get_logger() returns a thin stdlib wrapper that
accepts the same ``logger.debug("event.name", key=value)`` calls.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from structprops.config import ProjectionConfig

_configured = False


class _KwargsLogger:
    """Stdlib logger that takes structlog-style keyword fields.

    Fields ride on the LogRecord as ``record.fields``.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, event: str, **fields: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, event, extra={"fields": fields})

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, **fields)


def _renderer(log_format: str) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def setup_logging(config: ProjectionConfig) -> None:
    """Route structprops events through structlog to stderr.

    Replaces only the handler installed by a previous call.
    """
    global _configured

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(config.log_format),
            ],
        )
    )
    handler._structprops_managed = True  # type: ignore[attr-defined]

    root = logging.getLogger()
    _drop_managed_handlers(root)
    root.addHandler(handler)
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    _configured = True


def reset_logging() -> None:
    """Remove our handler and fall back to the stdlib wrapper."""
    global _configured
    _drop_managed_handlers(logging.getLogger())
    _configured = False


def _drop_managed_handlers(root: logging.Logger) -> None:
    for h in [h for h in root.handlers if getattr(h, "_structprops_managed", False)]:
        root.removeHandler(h)
        h.close()


def get_logger(name: str = "") -> Any:
    if _configured:
        return structlog.get_logger(name)
    return _KwargsLogger(logging.getLogger(name))
