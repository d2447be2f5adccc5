import logging

import uvicorn

from infrastructure.settings import Settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run() -> None:
    settings = Settings.from_env()
    _configure_logging(settings.log_level)

    logging.getLogger(__name__).info(
        "Task API listening on http://%s:%s (db=%s, reload=%s)",
        settings.host,
        settings.port,
        settings.db_path,
        settings.reload,
    )

    uvicorn.run(
        "backend_fastapi.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
