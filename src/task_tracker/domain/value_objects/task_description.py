from dataclasses import dataclass

from task_tracker.domain.exceptions.task_validation_error import TaskValidationError


@dataclass(frozen=True)
class TaskDescription:
    """Free-text description of a task. Never empty or whitespace-only."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise TaskValidationError("Task description cannot be empty")

    def __str__(self) -> str:
        return self.value
