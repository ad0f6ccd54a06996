from task_tracker.domain.exceptions.duplicate_task_id_error import DuplicateTaskIdError
from task_tracker.domain.exceptions.invalid_task_id_error import InvalidTaskIdError
from task_tracker.domain.exceptions.task_tracker_error import TaskTrackerError
from task_tracker.domain.exceptions.task_validation_error import TaskValidationError

__all__ = [
    "DuplicateTaskIdError",
    "InvalidTaskIdError",
    "TaskTrackerError",
    "TaskValidationError",
]
