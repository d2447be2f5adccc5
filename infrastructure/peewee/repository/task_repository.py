import os

from core.domain.models.task import Task, TaskChanges, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db, init_db


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        status=TaskStatus(task_model.status),
        created_at=task_model.created_at,
    )


class PeeweeTaskRepository(TaskRepository):
    """
    Each call opens and closes its own connection, so no connection
    outlives the request thread that used it.
    """

    def __init__(self, db_path: str | os.PathLike[str] | None = None) -> None:
        self._database = init_db(db_path)
        with db.connection_context():
            db.create_tables([TaskModel], safe=True)

    def _select(self, status: TaskStatus | None):
        query = TaskModel.select()
        if status is not None:
            query = query.where(TaskModel.status == status.value)
        return query

    def count(self, status: TaskStatus | None = None) -> int:
        with db.connection_context():
            return self._select(status).count()

    def list_page(
        self, limit: int, offset: int, status: TaskStatus | None = None
    ) -> list[Task]:
        query = (
            self._select(status)
            .order_by(TaskModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        with db.connection_context():
            return [_to_domain(t) for t in query]

    def get(self, task_id: int) -> Task | None:
        with db.connection_context():
            task_model = TaskModel.get_or_none(TaskModel.id == task_id)
        if task_model is None:
            return None
        return _to_domain(task_model)

    def create(self, title: str) -> int:
        # status and created_at take their column defaults.
        with db.connection_context(), db.atomic():
            return TaskModel.insert(title=title).execute()

    def update(self, task_id: int, changes: TaskChanges) -> int:
        fields = {}
        if changes.title is not None:
            fields[TaskModel.title] = changes.title
        if changes.status is not None:
            fields[TaskModel.status] = changes.status.value

        with db.connection_context():
            if changes.is_empty():
                return TaskModel.select().where(TaskModel.id == task_id).count()
            with db.atomic():
                return TaskModel.update(fields).where(TaskModel.id == task_id).execute()

    def delete(self, task_id: int) -> int:
        with db.connection_context(), db.atomic():
            return TaskModel.delete().where(TaskModel.id == task_id).execute()

    def close(self) -> None:
        # Connections are per call; this only catches one left open by hand.
        if not self._database.is_closed():
            self._database.close()
