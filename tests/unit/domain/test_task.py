import dataclasses
from uuid import UUID

import pytest

from task_tracker.domain.entities.task import Task
from task_tracker.domain.exceptions import TaskValidationError
from task_tracker.domain.value_objects.task_description import TaskDescription


class TestTaskCreation:
    def test_create_builds_pending_task(self):
        task = Task.create("buy milk")

        assert isinstance(task.id, UUID)
        assert task.description == TaskDescription("buy milk")
        assert task.completed is False

    def test_create_generates_distinct_ids(self):
        ids = {Task.create("same text").id for _ in range(50)}
        assert len(ids) == 50

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_create_rejects_blank_description(self, text):
        with pytest.raises(TaskValidationError):
            Task.create(text)


class TestTaskCompletion:
    def test_complete_returns_completed_copy(self):
        task = Task.create("write tests")

        completed = task.complete()

        assert completed.completed is True
        assert completed.id == task.id
        assert completed.description == task.description
        # original value untouched
        assert task.completed is False

    def test_complete_is_idempotent(self):
        once = Task.create("write tests").complete()
        twice = once.complete()

        assert twice.completed is True
        assert twice == once

    def test_id_cannot_be_reassigned(self):
        task = Task.create("immutable id")
        with pytest.raises(dataclasses.FrozenInstanceError):
            task.id = Task.create("other").id
