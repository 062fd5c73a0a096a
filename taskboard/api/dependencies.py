"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.services.auth import decode_access_token
from taskboard.services.board_access import BoardAccess
from taskboard.services.board_service import BoardService
from taskboard.services.column_service import ColumnService
from taskboard.services.task_service import TaskService
from taskboard.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Invalid authentication credentials")

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise _unauthorized("Invalid authentication credentials")

    user = db.query(User).filter(User.id == int(user_id)).first()
    if user is None:
        raise _unauthorized("User not found")

    return user


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_board_service(
    db: Annotated[Session, Depends(get_db)],
) -> BoardService:
    """Get board service with dependencies."""
    return BoardService(db, BoardAccess(db))


def get_column_service(
    db: Annotated[Session, Depends(get_db)],
) -> ColumnService:
    """Get column service with dependencies."""
    return ColumnService(db, BoardAccess(db))


def get_task_service(
    db: Annotated[Session, Depends(get_db)],
) -> TaskService:
    """Get task service with dependencies."""
    return TaskService(db, BoardAccess(db))
