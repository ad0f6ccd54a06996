from task_tracker.infrastructure.configuration.app_settings import AppSettings
from task_tracker.infrastructure.configuration.resolution.container import build_console_menu
from task_tracker.infrastructure.observability.logger_factory_service import configure_logging


def main() -> int:
    """Run the interactive task tracker."""
    settings = AppSettings()
    configure_logging(settings)
    menu = build_console_menu(settings)
    return menu.run()
