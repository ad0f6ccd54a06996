"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger

Log lines go to stderr; stdout belongs to the console menu.
"""

from __future__ import annotations

import functools
import logging
import sys
from typing import Any

import structlog

from task_tracker.infrastructure.configuration.app_settings import AppSettings
from task_tracker.infrastructure.observability.logging.task_event_processor import (
    task_event_processor,
)

_CONFIGURED = False


def configure_logging(settings: AppSettings) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    The renderer follows settings.log_format; the JSON renderer also reshapes
    events with task_event_processor.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = logging.getLevelNamesMapping()[settings.log_level]
    shared_processors = build_processors(settings)

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Stdlib bridge: route logging.getLogger() output through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)


def build_processors(settings: AppSettings) -> list[Any]:
    """Processor chain ending with the renderer selected by settings.log_format."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.log_format == "json":
        processors.append(
            functools.partial(task_event_processor, service_name=settings.app_name)
        )
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def get_logger(component: str) -> Any:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger(context_component=component)
