from task_tracker.infrastructure.configuration.app_settings import AppSettings

__all__ = ["AppSettings"]
