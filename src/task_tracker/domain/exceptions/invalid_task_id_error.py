from task_tracker.domain.exceptions.task_tracker_error import TaskTrackerError


class InvalidTaskIdError(TaskTrackerError):
    """Raised when text entered as a task id is not a valid identifier."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(f"Invalid task id: {raw_value!r}", context={"raw_value": raw_value})
        self.raw_value = raw_value
