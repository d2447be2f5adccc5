from dataclasses import dataclass, field
from enum import Enum


class TaskStatus(Enum):
    OPEN = "open"
    IN_PROGRESS = "in-progress"
    DONE = "done"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    status: TaskStatus = TaskStatus.OPEN
    created_at: str | None = None


@dataclass(slots=True)
class TaskPage:
    page: int
    limit: int
    total: int
    items: list[Task] = field(default_factory=list)


@dataclass(slots=True)
class TaskChanges:
    """Fields to replace on a task; ``None`` leaves the column untouched."""

    title: str | None = None
    status: TaskStatus | None = None

    def is_empty(self) -> bool:
        return self.title is None and self.status is None
