from task_tracker.domain.entities.task import Task
from task_tracker.infrastructure.entrypoints.cli.mappers.task_line_mapper import TaskLineMapper


def test_pending_task_line():
    task = Task.create("buy milk")
    assert TaskLineMapper.to_line(task) == f"{task.id} - buy milk - Completed: false"


def test_completed_task_line():
    task = Task.create("buy milk").complete()
    assert TaskLineMapper.to_line(task) == f"{task.id} - buy milk - Completed: true"
