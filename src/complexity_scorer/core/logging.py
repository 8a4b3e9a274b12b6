"""Structured logging setup for the complexity scorer."""
import sys
from typing import Any, List, Optional, TextIO

import structlog

from complexity_scorer.constants import LoggingDefaults

_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
}


def _open_log_stream(log_file: Optional[str]) -> TextIO:
    if log_file is None:
        return sys.stderr
    return open(log_file, "a", encoding="utf-8")


def configure_logging(
    log_level: str = LoggingDefaults.DEFAULT_LEVEL,
    log_file: Optional[str] = None,
    json_output: bool = True,
) -> None:
    """Configure structlog for the process.

    Stdout is reserved for the MCP stdio transport, so logs go to stderr
    unless a file is given.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR (unknown values mean INFO)
        log_file: Optional file to append log lines to
        json_output: Render JSON lines; otherwise use the console renderer
    """
    renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS.get(log_level.upper(), 20)),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_open_log_stream(log_file)),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
