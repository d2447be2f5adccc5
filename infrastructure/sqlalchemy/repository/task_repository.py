import os

from sqlalchemy import func

from core.domain.models.task import Task, TaskChanges, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.sqlalchemy.model.models import TaskModel
from infrastructure.sqlalchemy.session.db import (
    create_db_engine,
    create_session_factory,
    init_db,
)


def _to_domain(task_model: TaskModel) -> Task:
    return Task(
        id=task_model.id,
        title=task_model.title,
        status=TaskStatus(task_model.status),
        created_at=task_model.created_at,
    )


class SqlAlchemyTaskRepository(TaskRepository):
    def __init__(self, db_path: str | os.PathLike[str] | None = None) -> None:
        self._engine = create_db_engine(db_path)
        init_db(self._engine)
        self._session_factory = create_session_factory(self._engine)

    def _filtered(self, query, status: TaskStatus | None):
        if status is not None:
            query = query.filter(TaskModel.status == status.value)
        return query

    def count(self, status: TaskStatus | None = None) -> int:
        session = self._session_factory()
        try:
            query = self._filtered(session.query(func.count(TaskModel.id)), status)
            return query.scalar() or 0
        finally:
            session.close()

    def list_page(
        self, limit: int, offset: int, status: TaskStatus | None = None
    ) -> list[Task]:
        session = self._session_factory()
        try:
            query = (
                self._filtered(session.query(TaskModel), status)
                .order_by(TaskModel.id.asc())
                .limit(limit)
                .offset(offset)
            )
            return [_to_domain(task_model) for task_model in query.all()]
        finally:
            session.close()

    def get(self, task_id: int) -> Task | None:
        session = self._session_factory()
        try:
            task_model = session.get(TaskModel, task_id)
            if task_model is None:
                return None
            return _to_domain(task_model)
        finally:
            session.close()

    def create(self, title: str) -> int:
        session = self._session_factory()
        try:
            task_model = TaskModel(title=title)
            session.add(task_model)
            session.commit()
            return task_model.id
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def update(self, task_id: int, changes: TaskChanges) -> int:
        values = {}
        if changes.title is not None:
            values[TaskModel.title] = changes.title
        if changes.status is not None:
            values[TaskModel.status] = changes.status.value

        session = self._session_factory()
        try:
            query = session.query(TaskModel).filter(TaskModel.id == task_id)
            if changes.is_empty():
                return query.count()
            affected = query.update(values, synchronize_session=False)
            session.commit()
            return affected
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def delete(self, task_id: int) -> int:
        session = self._session_factory()
        try:
            affected = (
                session.query(TaskModel)
                .filter(TaskModel.id == task_id)
                .delete(synchronize_session=False)
            )
            session.commit()
            return affected
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        self._engine.dispose()
