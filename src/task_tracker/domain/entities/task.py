from dataclasses import dataclass, replace

from task_tracker.domain.value_objects.task_description import TaskDescription
from task_tracker.domain.value_objects.task_id import TaskId, new_task_id


@dataclass(frozen=True)
class Task:
    id: TaskId
    description: TaskDescription
    completed: bool = False

    @classmethod
    def create(cls, description_text: str) -> "Task":
        """
        Builds a fresh, not yet completed task with a newly generated id.
        Raises TaskValidationError if the description is empty or whitespace-only.
        """
        return cls(id=new_task_id(), description=TaskDescription(description_text))

    def complete(self) -> "Task":
        """
        Returns a copy of this task marked as completed.
        Completing an already completed task returns it unchanged.
        """
        if self.completed:
            return self
        return replace(self, completed=True)
