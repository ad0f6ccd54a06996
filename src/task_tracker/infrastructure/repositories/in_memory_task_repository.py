import threading

from task_tracker.application.ports.task_repository import TaskRepository
from task_tracker.domain.entities.task import Task
from task_tracker.domain.exceptions.duplicate_task_id_error import DuplicateTaskIdError
from task_tracker.domain.value_objects.task_id import TaskId


class InMemoryTaskRepository(TaskRepository):
    """
    Process-lifetime repository backed by a dict keyed by task id.
    A re-entrant lock serializes mutations so get_all always sees a consistent snapshot.
    """

    def __init__(self):
        self._tasks: dict[TaskId, Task] = {}
        self._lock = threading.RLock()

    def add(self, task: Task) -> None:
        with self._lock:
            if task.id in self._tasks:
                raise DuplicateTaskIdError(task.id)
            self._tasks[task.id] = task

    def get(self, task_id: TaskId) -> Task | None:
        with self._lock:
            return self._tasks.get(task_id)

    def get_all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def save(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task
