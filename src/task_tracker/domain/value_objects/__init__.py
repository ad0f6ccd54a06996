from task_tracker.domain.value_objects.task_description import TaskDescription
from task_tracker.domain.value_objects.task_id import TaskId, new_task_id, parse_task_id

__all__ = [
    "TaskDescription",
    "TaskId",
    "new_task_id",
    "parse_task_id",
]
