from collections.abc import Callable

from task_tracker.application.usecases.task_service import TaskService
from task_tracker.domain.exceptions.invalid_task_id_error import InvalidTaskIdError
from task_tracker.domain.exceptions.task_validation_error import TaskValidationError
from task_tracker.domain.value_objects.task_id import parse_task_id
from task_tracker.infrastructure.entrypoints.cli.mappers.task_line_mapper import TaskLineMapper

BANNER = "Task Management Console Application"
MENU_OPTIONS = (
    "1. Add Task",
    "2. Complete Task",
    "3. List Tasks",
    "0. Exit",
)


class ConsoleMenu:
    """
    Line-oriented interactive menu over TaskService.
    read_line/write default to input/print.
    """

    def __init__(
        self,
        service: TaskService,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ):
        self._service = service
        self._read_line = read_line or input
        self._write = write or print
        self._actions: dict[str, Callable[[], None]] = {
            "1": self._add_task,
            "2": self._complete_task,
            "3": self._list_tasks,
        }

    def run(self) -> int:
        """Runs the menu loop until '0' or end of input. Returns the process exit status."""
        self._write(BANNER)
        while True:
            for option in MENU_OPTIONS:
                self._write(option)

            choice = self._read("")
            if choice is None or choice.strip() == "0":
                return 0

            action = self._actions.get(choice.strip())
            if action is None:
                self._write("Invalid option. Try again.")
                continue
            action()

    def _read(self, prompt: str) -> str | None:
        try:
            return self._read_line(prompt)
        except EOFError:
            return None

    def _add_task(self) -> None:
        description = self._read("Enter task description: ")
        if description is None:
            return
        try:
            task_id = self._service.add_task(description)
        except TaskValidationError as e:
            self._write(f"Error: {e}")
            return
        self._write(f"Task added: {task_id}")

    def _complete_task(self) -> None:
        raw_id = self._read("Enter task ID to complete: ")
        if raw_id is None:
            return
        try:
            task_id = parse_task_id(raw_id)
        except InvalidTaskIdError:
            self._write("Invalid Task ID")
            return
        self._service.complete_task(task_id)

    def _list_tasks(self) -> None:
        for task in self._service.list_tasks():
            self._write(TaskLineMapper.to_line(task))
