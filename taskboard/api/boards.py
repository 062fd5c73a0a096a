"""Board API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from taskboard.api.dependencies import get_board_service, get_current_user
from taskboard.config import get_settings
from taskboard.models.user import User
from taskboard.schemas.board import (
    BoardCreate,
    BoardPage,
    BoardResponse,
    BoardUpdate,
    MemberInvite,
    MembershipResponse,
    MessageResponse,
)
from taskboard.services.board_service import BoardService

settings = get_settings()

router = APIRouter(prefix="/api/v1/boards", tags=["boards"])


@router.post("", response_model=BoardResponse, status_code=status.HTTP_201_CREATED)
def create_board(
    board_data: BoardCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
):
    """Create a board. The creator becomes its owner."""
    return boards.create(board_data.name, current_user.id)


@router.get("", response_model=BoardPage)
def get_boards(
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.default_page_size, ge=1, le=settings.max_page_size),
    search: str | None = Query(default=None, max_length=255),
):
    """Get the boards the current user is a member of."""
    return boards.find_many(current_user.id, page=page, limit=limit, search=search)


@router.get("/{board_id}", response_model=BoardResponse)
def get_board(
    board_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
):
    """Get a specific board."""
    return boards.find_one(board_id, current_user.id)


@router.patch("/{board_id}", response_model=BoardResponse)
def update_board(
    board_id: int,
    board_data: BoardUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
):
    """Update a board."""
    return boards.update(board_id, board_data.model_dump(exclude_unset=True), current_user.id)


@router.delete("/{board_id}", response_model=MessageResponse)
def delete_board(
    board_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
):
    """Soft delete a board."""
    boards.delete(board_id, current_user.id)
    return MessageResponse(message=f"Board {board_id} deleted successfully")


@router.post(
    "/{board_id}/members",
    response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
def invite_member(
    board_id: int,
    invite: MemberInvite,
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
):
    """Invite an existing user to the board (owner only)."""
    return boards.invite_member(board_id, invite.email, invite.role, current_user.id)


@router.get("/{board_id}/members", response_model=list[MembershipResponse])
def get_members(
    board_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    boards: Annotated[BoardService, Depends(get_board_service)],
):
    """Get the members of a board."""
    return boards.list_members(board_id, current_user.id)
