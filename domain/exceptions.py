class TaskError(Exception):
    """Base class for errors raised by task operations."""


class InvalidInput(TaskError):
    pass


class NotFound(TaskError):
    def __init__(self, task_id: int):
        super().__init__(f"Task not found for id={task_id}")
        self.task_id = task_id
