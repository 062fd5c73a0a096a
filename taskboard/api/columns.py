"""Column API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import get_column_service, get_current_user
from taskboard.models.user import User
from taskboard.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate
from taskboard.services.column_service import ColumnService

router = APIRouter(prefix="/api/v1/boards/{board_id}/columns", tags=["columns"])


@router.post("", response_model=ColumnResponse, status_code=status.HTTP_201_CREATED)
def create_column(
    board_id: int,
    column_data: ColumnCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    columns: Annotated[ColumnService, Depends(get_column_service)],
):
    """Append a column to a board."""
    return columns.create(board_id, column_data.name, current_user.id)


@router.get("", response_model=list[ColumnResponse])
def get_columns(
    board_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    columns: Annotated[ColumnService, Depends(get_column_service)],
):
    """Get all columns of a board in order."""
    return columns.find_all(board_id, current_user.id)


@router.patch("/{column_id}", response_model=ColumnResponse)
def update_column(
    board_id: int,
    column_id: int,
    column_data: ColumnUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    columns: Annotated[ColumnService, Depends(get_column_service)],
):
    """Rename a column."""
    return columns.update(
        board_id, column_id, column_data.model_dump(exclude_unset=True), current_user.id
    )


@router.delete("/{column_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_column(
    board_id: int,
    column_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    columns: Annotated[ColumnService, Depends(get_column_service)],
):
    """Soft delete a column."""
    columns.remove(board_id, column_id, current_user.id)
