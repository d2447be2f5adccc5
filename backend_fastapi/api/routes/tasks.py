from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    update_task_use_case,
)
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksCommand, ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.application.validation import parse_task_id
from core.domain.models.task import Task, TaskPage

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get(
    "",
    response_model=TaskPage,
    summary="List tasks",
)
def list_tasks(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> TaskPage:
    """
    Returns one page of tasks ordered by id.

    - **page**: 1-based page number (default 1).
    - **limit**: page size between 1 and 100 (default 20).
    - **status**: only tasks in this status (open, in-progress, done).
    """
    cmd = ListTasksCommand.from_query(page=page, limit=limit, status=status_filter)
    return use_case.execute(cmd)


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> Task:
    return use_case.execute(parse_task_id(task_id))


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
def create_task(
    payload: Any = Body(None),
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> Task:
    """
    Creates a task in status `open`.

    - **title**: non-empty title, surrounding whitespace is dropped.
    """
    return use_case.execute(CreateTaskCommand.from_payload(payload))


@router.patch(
    "/{task_id}",
    response_model=Task,
    summary="Update a task",
)
def update_task(
    task_id: str,
    payload: Any = Body(None),
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Task:
    """
    Replaces the title and/or status of a task. Omitted fields keep
    their current value.

    - **title**: new non-empty title.
    - **status**: new status (open, in-progress, done).
    """
    task_id_value = parse_task_id(task_id)
    return use_case.execute(task_id_value, UpdateTaskCommand.from_payload(payload))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> None:
    use_case.execute(DeleteTaskCommand(id=parse_task_id(task_id)))
