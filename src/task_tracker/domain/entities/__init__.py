from task_tracker.domain.entities.task import Task

__all__ = ["Task"]
