from typing import Any


class TaskTrackerError(Exception):
    """Base exception for all task tracker errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}
