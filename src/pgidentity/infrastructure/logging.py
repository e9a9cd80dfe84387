"""Structlog wiring for pgidentity's probe events.

Every probe logs through ``get_logger`` under the ``pgidentity`` logger
name, tagged with the component that emitted the event. Host applications
that already configure structlog get the events through their own setup.
Applications that do not can call ``configure_logging`` once at startup to
route the events through the standard library logger ``pgidentity``:

    from infrastructure.logging import configure_logging

    configure_logging(logging.DEBUG)
"""

import logging
import os
import sys
from typing import Any, TextIO

import structlog

LOGGER_NAME = "pgidentity"


def get_logger(component: str, **initial_values: Any) -> Any:
    """Return a structlog logger for one pgidentity component.

    Args:
        component: Emitting component, bound as the ``component`` key
        **initial_values: Extra key/value pairs bound to every event
    """
    return structlog.get_logger(LOGGER_NAME, component=component, **initial_values)


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Send pgidentity events to ``stream`` through the stdlib ``pgidentity`` logger.

    Events render as colored console lines when FORCE_COLOR is set or the
    stream is a TTY, otherwise as one JSON object per line.

    Args:
        level: Minimum level for the ``pgidentity`` logger
        stream: Output stream, stdout by default
    """
    stream = stream or sys.stdout
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if force_color or stream.isatty():
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend(
            [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
