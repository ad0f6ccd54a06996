from uuid import UUID

from task_tracker.domain.exceptions.task_tracker_error import TaskTrackerError


class DuplicateTaskIdError(TaskTrackerError):
    """Raised when a repository already holds a task under the same id."""

    def __init__(self, task_id: UUID) -> None:
        super().__init__(f"Task {task_id} already exists", context={"task_id": str(task_id)})
        self.task_id = task_id
