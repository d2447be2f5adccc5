class TaskValidationError(ValueError):
    """Rejected input. Rendered as a 400."""


class TaskNotFoundError(LookupError):
    """Unknown or malformed task id. Rendered as a 404."""

    def __init__(self, message: str = "Task not found") -> None:
        super().__init__(message)
