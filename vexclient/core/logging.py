"""Structured logging configuration using structlog."""

import logging
import sys
from enum import Enum

import structlog

from vexclient.core.config import Settings, get_settings

_configured = False


def _enum_values(
    logger: logging.Logger, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Render Status/Scope/Reason members as their wire strings."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_logging(settings: Settings | None = None, *, force: bool = False) -> None:
    """Configure structlog once per process.

    ``force=True`` re-reads the environment (the cached settings are dropped)
    and rebuilds the processor chain; passing ``settings`` implies it.
    """
    global _configured
    rebuild = force or settings is not None
    if _configured and not rebuild:
        return
    if settings is None:
        if force:
            get_settings.cache_clear()
        settings = get_settings()
    _configured = True

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _enum_values,
    ]
    if settings.debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    else:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # add_logger_name needs stdlib loggers (they carry .name)
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=not settings.debug,
    )

    # stderr keeps `vex` output on stdout clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
        force=rebuild,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    configure_logging()
    return structlog.get_logger(name)
