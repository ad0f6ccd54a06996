from task_tracker.infrastructure.observability.logging.task_event_processor import (
    task_event_processor,
)

__all__ = ["task_event_processor"]
