"""Board membership checks shared by every board-scoped operation."""

import logging

from sqlalchemy.orm import Session

from taskboard.errors import ForbiddenError
from taskboard.models.board import Board, BoardMembership
from taskboard.models.enums import Role

logger = logging.getLogger(__name__)


class BoardAccess:
    """Answers whether a user may act on a board, and with which role.

    Checks are read-only and run on the caller's session, so they share the
    transaction of the operation they guard.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_membership(self, board_id: int, user_id: int) -> BoardMembership | None:
        """Get the caller's membership on an active board, if any."""
        return (
            self.db.query(BoardMembership)
            .join(Board, Board.id == BoardMembership.board_id)
            .filter(
                BoardMembership.board_id == board_id,
                BoardMembership.user_id == user_id,
                Board.deleted_at.is_(None),
            )
            .first()
        )

    def check_access(self, board_id: int, user_id: int) -> None:
        """Raise ForbiddenError unless the user is a member of the board."""
        if self.get_membership(board_id, user_id) is None:
            logger.debug(f"User {user_id} denied access to board {board_id}")
            raise ForbiddenError("User is not a member of the board")

    def resolve_owner_membership(self, board_id: int, user_id: int) -> BoardMembership:
        """Return the caller's membership, which must carry the OWNER role."""
        membership = self.get_membership(board_id, user_id)
        if membership is None or not Role(membership.role).can_invite():
            logger.warning(f"User {user_id} attempted an owner action on board {board_id}")
            raise ForbiddenError("Only the board owner can manage members")
        return membership
