from task_tracker.application.usecases.task_service import TaskService
from task_tracker.domain.entities.task import Task
from task_tracker.domain.value_objects.task_description import TaskDescription
from task_tracker.infrastructure.repositories.in_memory_task_repository import (
    InMemoryTaskRepository,
)

__all__ = [
    "InMemoryTaskRepository",
    "Task",
    "TaskDescription",
    "TaskService",
]
