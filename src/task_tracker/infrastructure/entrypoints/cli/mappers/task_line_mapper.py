from task_tracker.domain.entities.task import Task


class TaskLineMapper:
    """Renders a task as one console line: '<id> - <description> - Completed: <true|false>'."""

    @staticmethod
    def to_line(task: Task) -> str:
        completed = "true" if task.completed else "false"
        return f"{task.id} - {task.description.value} - Completed: {completed}"
