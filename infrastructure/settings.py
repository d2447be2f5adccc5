"""
Settings read from the environment (plus an optional ``.env`` file).

Read once at startup; request handling never touches ``os.environ``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DB_PATH = Path("data") / "tasks.db"
DEFAULT_PORT = 3000
SUPPORTED_ORMS = ("peewee", "sqlalchemy")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def resolve_db_path(db_path: str | os.PathLike[str] | None = None) -> Path:
    return Path(db_path) if db_path else DEFAULT_DB_PATH


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    db_path: Path = DEFAULT_DB_PATH
    orm: str = "peewee"
    log_level: str = "info"
    reload: bool = False
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        orm = os.getenv("ORM", "peewee").strip().lower()
        if orm not in SUPPORTED_ORMS:
            raise ValueError(f"ORM must be one of: {', '.join(SUPPORTED_ORMS)}")

        return cls(
            host=os.getenv("HOST", "127.0.0.1"),
            port=_env_int("PORT", DEFAULT_PORT),
            db_path=resolve_db_path(os.getenv("DB_PATH")),
            orm=orm,
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            reload=_as_bool(os.getenv("RELOAD", "false")),
            cors_origins=_as_list(os.getenv("CORS_ORIGINS", "*")),
            cors_allow_credentials=_as_bool(os.getenv("CORS_ALLOW_CREDENTIALS", "true")),
            cors_allow_methods=_as_list(os.getenv("CORS_ALLOW_METHODS", "*")),
            cors_allow_headers=_as_list(os.getenv("CORS_ALLOW_HEADERS", "*")),
        )
