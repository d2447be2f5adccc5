from dataclasses import dataclass

from core.application.validation import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_SQLITE_INTEGER,
    parse_limit,
    parse_page,
    parse_status_filter,
)
from core.domain.models.task import TaskPage, TaskStatus
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class ListTasksCommand:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    status: TaskStatus | None = None

    @classmethod
    def from_query(
        cls,
        page: str | None = None,
        limit: str | None = None,
        status: str | None = None,
    ) -> "ListTasksCommand":
        return cls(
            page=parse_page(page),
            limit=parse_limit(limit),
            status=parse_status_filter(status),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListTasksCommand) -> TaskPage:
        total = self._repository.count(cmd.status)
        if cmd.offset > MAX_SQLITE_INTEGER:
            # Past any row SQLite can hold.
            items = []
        else:
            items = self._repository.list_page(cmd.limit, cmd.offset, cmd.status)
        return TaskPage(page=cmd.page, limit=cmd.limit, total=total, items=items)
