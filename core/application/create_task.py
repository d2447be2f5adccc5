import logging
from dataclasses import dataclass
from typing import Any

from core.application.validation import TITLE_REQUIRED_ERROR, as_object, clean_string
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateTaskCommand":
        title = clean_string(as_object(payload).get("title"))
        if title is None:
            raise TaskValidationError(TITLE_REQUIRED_ERROR)
        return cls(title=title)


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        task_id = self._repository.create(cmd.title)
        logger.info("Created task id=%s", task_id)
        task = self._repository.get(task_id)
        if task is None:
            # Deleted between the insert and the read.
            raise TaskNotFoundError()
        return task
