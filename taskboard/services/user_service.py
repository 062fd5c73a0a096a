"""User account service."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskboard.errors import BadRequestError, ConflictError, ForbiddenError, NotFoundError
from taskboard.models.board import Board, BoardMembership
from taskboard.models.enums import Role
from taskboard.models.user import User
from taskboard.services.auth import get_password_hash

logger = logging.getLogger(__name__)


class UserService:
    """Service for user account operations."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password: str, name: str | None = None) -> User:
        """Create a new user. Raises ConflictError if the email is taken."""
        user = User(email=email, password_hash=get_password_hash(password), name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email already registered") from None
        self.db.refresh(user)
        logger.info(f"User {user.id} registered")
        return user

    def get(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError(f"User with id {user_id} not found")
        return user

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.id).all()

    def delete(self, user_id: int, caller_id: int) -> None:
        """Delete an account. Users may only delete themselves.

        Refused while the user owns any board, deleted or not, so that no board
        row is ever left without an owner membership.
        """
        if user_id != caller_id:
            raise ForbiddenError("You can only delete your own account")

        user = self.get(user_id)

        owned_boards = (
            self.db.query(Board.id)
            .join(BoardMembership, BoardMembership.board_id == Board.id)
            .filter(
                BoardMembership.user_id == user_id,
                BoardMembership.role == Role.OWNER.value,
            )
            .count()
        )
        if owned_boards:
            raise BadRequestError("Accounts that own boards cannot be deleted")

        self.db.delete(user)
        self.db.commit()
        logger.info(f"User {user_id} deleted")
