class TaskError(Exception):
    """Base class for errors raised by the task store."""

    status_code = 500


class ValidationError(TaskError):
    """Client supplied data failed a precondition (e.g. an empty title)."""

    status_code = 400


class NotFoundError(TaskError):
    status_code = 404

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class StorageError(TaskError):
    """A query or connection failed. The cause is logged, never returned to callers."""

    status_code = 500
