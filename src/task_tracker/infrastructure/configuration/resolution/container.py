"""Functional DI container: builds fully-wired task tracker components.

Every builder returns fresh instances; there is no module-level state.
"""

from task_tracker.application.ports.task_repository import TaskRepository
from task_tracker.application.usecases.task_service import TaskService
from task_tracker.infrastructure.configuration.app_settings import AppSettings
from task_tracker.infrastructure.entrypoints.cli.console_menu import ConsoleMenu
from task_tracker.infrastructure.repositories.in_memory_task_repository import (
    InMemoryTaskRepository,
)


def build_task_repository(settings: AppSettings) -> TaskRepository:  # noqa: ARG001
    return InMemoryTaskRepository()


def build_task_service(settings: AppSettings) -> TaskService:
    return TaskService(repository=build_task_repository(settings))


def build_console_menu(settings: AppSettings, **io_overrides) -> ConsoleMenu:
    """io_overrides are passed through to ConsoleMenu (read_line, write)."""
    return ConsoleMenu(build_task_service(settings), **io_overrides)
