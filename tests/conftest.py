import pytest

from task_tracker.application.usecases.task_service import TaskService
from task_tracker.infrastructure.configuration.app_settings import AppSettings
from task_tracker.infrastructure.repositories.in_memory_task_repository import (
    InMemoryTaskRepository,
)


@pytest.fixture
def settings(monkeypatch):
    for key in ("TASK_TRACKER_APP_NAME", "TASK_TRACKER_LOG_LEVEL", "TASK_TRACKER_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    return AppSettings()


@pytest.fixture
def repository():
    return InMemoryTaskRepository()


@pytest.fixture
def service(repository):
    return TaskService(repository)


class ScriptedConsole:
    """Feeds scripted lines to ConsoleMenu and records what it writes."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt):
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text):
        self.output.append(text)


@pytest.fixture
def scripted_console():
    return ScriptedConsole
