"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import get_current_user, get_task_service
from taskboard.models.user import User
from taskboard.schemas.task import TaskCreate, TaskResponse
from taskboard.services.task_service import TaskService

router = APIRouter(
    prefix="/api/v1/boards/{board_id}/columns/{column_id}/tasks",
    tags=["tasks"],
)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    board_id: int,
    column_id: int,
    task_data: TaskCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
):
    """Append a task to a column."""
    return tasks.create(
        board_id, column_id, task_data.title, task_data.description, current_user.id
    )


@router.get("", response_model=list[TaskResponse])
def get_tasks(
    board_id: int,
    column_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    tasks: Annotated[TaskService, Depends(get_task_service)],
):
    """Get all tasks of a column in order."""
    return tasks.find_all(board_id, column_id, current_user.id)
