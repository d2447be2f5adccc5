from sqlalchemy import CheckConstraint, Column, Integer, Text, text

from core.domain.models.task import TaskStatus
from infrastructure.sqlalchemy.session.db import Base

_STATUS_VALUES = ", ".join(f"'{s.value}'" for s in TaskStatus)


class TaskModel(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(f"status IN ({_STATUS_VALUES})", name="ck_tasks_status"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    status = Column(Text, nullable=False, server_default=TaskStatus.OPEN.value)
    created_at = Column(Text, server_default=text("CURRENT_TIMESTAMP"))
