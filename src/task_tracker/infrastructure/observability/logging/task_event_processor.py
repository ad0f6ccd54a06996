"""Structlog processor that shapes task tracker events into a nested schema.

The service name is bound with functools.partial when the chain is built.
Flat keys bound by callers (task_id, task_completed, error_type, ...) are
moved into their own blocks; anything left over ends up under "extra".
All field extraction uses dict.pop(key, default) to avoid KeyError.
"""

from __future__ import annotations

from typing import Any


def _build_root_fields(event_dict: dict[str, Any], service_name: str) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": service_name,
        "message": event_dict.pop("event", ""),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {"component": component}


def _build_task(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    task_id = event_dict.pop("task_id", None)
    completed = event_dict.pop("task_completed", None)
    if task_id is None and completed is None:
        return None
    return {"id": task_id, "completed": completed}


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def task_event_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
    *,
    service_name: str,
) -> dict[str, Any]:
    result = _build_root_fields(event_dict, service_name)

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    task = _build_task(event_dict)
    if task is not None:
        result["task"] = task

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
