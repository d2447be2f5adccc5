import logging
import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infrastructure.settings import resolve_db_path

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_wal(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    try:
        cursor.execute("PRAGMA journal_mode=WAL")
    finally:
        cursor.close()


def create_db_engine(db_path: str | os.PathLike[str] | None = None) -> Engine:
    path = resolve_db_path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _enable_wal)
    logger.info("Opened sqlalchemy store at %s", path)
    return engine


def init_db(engine: Engine) -> None:
    """Create the tables registered on ``Base``; a no-op for existing ones."""
    Base.metadata.create_all(bind=engine)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)
