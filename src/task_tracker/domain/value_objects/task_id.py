from uuid import UUID, uuid4

from task_tracker.domain.exceptions.invalid_task_id_error import InvalidTaskIdError

TaskId = UUID


def new_task_id() -> TaskId:
    return uuid4()


def parse_task_id(raw: str) -> TaskId:
    """
    Parses the canonical string form of a task id.
    Surrounding whitespace is ignored; anything else malformed raises InvalidTaskIdError.
    """
    if not isinstance(raw, str):
        raise InvalidTaskIdError(raw)
    try:
        return UUID(raw.strip())
    except ValueError as e:
        raise InvalidTaskIdError(raw) from e
