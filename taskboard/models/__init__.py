"""SQLAlchemy models."""

from taskboard.models.board import Board, BoardMembership
from taskboard.models.column import BoardColumn
from taskboard.models.enums import Role
from taskboard.models.task import Task
from taskboard.models.user import User

__all__ = [
    "User",
    "Board",
    "BoardMembership",
    "BoardColumn",
    "Task",
    "Role",
]
