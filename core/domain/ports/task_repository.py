from abc import ABC, abstractmethod

from core.domain.models.task import Task, TaskChanges, TaskStatus


class TaskRepository(ABC):
    @abstractmethod
    def count(self, status: TaskStatus | None = None) -> int:
        raise NotImplementedError

    @abstractmethod
    def list_page(
        self, limit: int, offset: int, status: TaskStatus | None = None
    ) -> list[Task]:
        """Return up to ``limit`` tasks ordered by id, skipping ``offset``."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def create(self, title: str) -> int:
        """Insert a task and return its generated id."""
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: int, changes: TaskChanges) -> int:
        """Apply the present fields of ``changes``; return rows affected."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> int:
        raise NotImplementedError

    def close(self) -> None:
        return None
