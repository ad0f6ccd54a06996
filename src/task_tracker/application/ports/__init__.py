from task_tracker.application.ports.task_repository import TaskRepository

__all__ = ["TaskRepository"]
