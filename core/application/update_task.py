import logging
from dataclasses import dataclass
from typing import Any

from core.application.validation import (
    UPDATE_EMPTY_ERROR,
    UPDATE_REQUIRED_ERROR,
    as_object,
    clean_string,
    parse_status,
)
from core.domain.errors import TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskChanges, TaskStatus
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateTaskCommand:
    title: str | None = None
    status: TaskStatus | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "UpdateTaskCommand":
        payload = as_object(payload)
        has_title = "title" in payload
        has_status = "status" in payload
        if not has_title and not has_status:
            raise TaskValidationError(UPDATE_REQUIRED_ERROR)

        title = clean_string(payload["title"]) if has_title else None
        status = clean_string(payload["status"]) if has_status else None
        if (has_title and title is None) or (has_status and status is None):
            raise TaskValidationError(UPDATE_EMPTY_ERROR)

        return cls(
            title=title,
            status=parse_status(status) if status is not None else None,
        )

    def to_changes(self) -> TaskChanges:
        return TaskChanges(title=self.title, status=self.status)


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: int, cmd: UpdateTaskCommand) -> Task:
        if self._repository.update(task_id, cmd.to_changes()) == 0:
            logger.debug("Update of missing task id=%s", task_id)
            raise TaskNotFoundError()
        logger.info("Updated task id=%s", task_id)

        task = self._repository.get(task_id)
        if task is None:
            raise TaskNotFoundError()
        return task
