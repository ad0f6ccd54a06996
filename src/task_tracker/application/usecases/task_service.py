from task_tracker.application.ports.task_repository import TaskRepository
from task_tracker.domain.entities.task import Task
from task_tracker.domain.value_objects.task_id import TaskId
from task_tracker.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("task_service")


class TaskService:
    """Entry point for the task operations. Validates input before touching the repository."""

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    def add_task(self, description_text: str) -> TaskId:
        """
        Creates a task and stores it.
        Raises TaskValidationError for an empty or whitespace-only description.
        """
        task = Task.create(description_text)
        self._repository.add(task)
        logger.info("task_added", task_id=str(task.id))
        return task.id

    def complete_task(self, task_id: TaskId) -> None:
        # Unknown ids are a silent no-op.
        task = self._repository.get(task_id)
        if task is None:
            logger.debug("task_not_found", task_id=str(task_id))
            return

        completed = task.complete()
        self._repository.save(completed)
        logger.info("task_completed", task_id=str(task_id), task_completed=completed.completed)

    def list_tasks(self) -> list[Task]:
        return self._repository.get_all()

    def get_task(self, task_id: TaskId) -> Task | None:
        return self._repository.get(task_id)
