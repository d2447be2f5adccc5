from peewee import SQL, Check, Model, TextField
from playhouse.sqlite_ext import AutoIncrementField

from core.domain.models.task import TaskStatus
from infrastructure.peewee.session.db import db

_STATUS_VALUES = ", ".join(f"'{s.value}'" for s in TaskStatus)


class TaskModel(Model):
    # AUTOINCREMENT so ids of deleted rows are never handed out again.
    id = AutoIncrementField()
    title = TextField()
    status = TextField(
        constraints=[
            SQL(f"DEFAULT '{TaskStatus.OPEN.value}'"),
            Check(f"status IN ({_STATUS_VALUES})"),
        ]
    )
    created_at = TextField(null=True, constraints=[SQL("DEFAULT CURRENT_TIMESTAMP")])

    class Meta:
        database = db
        table_name = "tasks"
