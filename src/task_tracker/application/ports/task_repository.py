from abc import ABC, abstractmethod

from task_tracker.domain.entities.task import Task
from task_tracker.domain.value_objects.task_id import TaskId


class TaskRepository(ABC):
    """Keyed holding area for tasks."""

    @abstractmethod
    def add(self, task: Task) -> None:
        """Inserts a new task. Raises DuplicateTaskIdError if its id is already stored."""
        pass

    @abstractmethod
    def get(self, task_id: TaskId) -> Task | None:
        """Finds a task by its id, None when absent."""
        pass

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Retrieves every stored task. Callers must not rely on the order."""
        pass

    @abstractmethod
    def save(self, task: Task) -> None:
        """Inserts or overwrites a task, keyed by its id."""
        pass
