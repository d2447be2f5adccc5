import logging
import os

from peewee import DatabaseProxy, SqliteDatabase

from infrastructure.settings import resolve_db_path

logger = logging.getLogger(__name__)

# Models bind to the proxy; init_db() points it at a concrete database.
db = DatabaseProxy()


def init_db(db_path: str | os.PathLike[str] | None = None) -> SqliteDatabase:
    path = resolve_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    database = SqliteDatabase(str(path), pragmas={"journal_mode": "wal"})
    db.initialize(database)
    logger.info("Opened peewee store at %s", path)
    return database