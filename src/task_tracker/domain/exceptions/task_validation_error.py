from task_tracker.domain.exceptions.task_tracker_error import TaskTrackerError


class TaskValidationError(TaskTrackerError):
    """Raised when a task is built from invalid input (e.g. an empty description)."""
