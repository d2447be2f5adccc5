import logging
from dataclasses import dataclass

from core.domain.errors import TaskNotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteTaskCommand:
    id: int


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> None:
        if self._repository.delete(cmd.id) == 0:
            logger.debug("Delete of missing task id=%s", cmd.id)
            raise TaskNotFoundError()
        logger.info("Deleted task id=%s", cmd.id)
