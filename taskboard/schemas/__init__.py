"""Pydantic schemas for API requests and responses."""

from taskboard.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from taskboard.schemas.board import (
    BoardCreate,
    BoardPage,
    BoardResponse,
    BoardUpdate,
    MemberInvite,
    MembershipResponse,
    MessageResponse,
    PageMeta,
)
from taskboard.schemas.column import ColumnCreate, ColumnResponse, ColumnUpdate
from taskboard.schemas.task import TaskCreate, TaskResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "BoardCreate",
    "BoardUpdate",
    "BoardResponse",
    "BoardPage",
    "PageMeta",
    "MemberInvite",
    "MembershipResponse",
    "MessageResponse",
    "ColumnCreate",
    "ColumnUpdate",
    "ColumnResponse",
    "TaskCreate",
    "TaskResponse",
]
