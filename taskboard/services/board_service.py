"""Board lifecycle service: CRUD, soft delete and member invitations."""

import logging
import math
from datetime import UTC, datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session

from taskboard.errors import BadRequestError, NotFoundError
from taskboard.models.board import Board, BoardMembership
from taskboard.models.enums import Role
from taskboard.schemas.board import BoardPage, BoardResponse, PageMeta
from taskboard.services.auth import get_user_by_email
from taskboard.services.board_access import BoardAccess

logger = logging.getLogger(__name__)


def is_member(user_id: int):
    """EXISTS predicate: the user holds any membership on the board."""
    return Board.memberships.any(BoardMembership.user_id == user_id)


class BoardService:
    """Service for board-related operations."""

    def __init__(self, db: Session, access: BoardAccess | None = None):
        self.db = db
        self.access = access or BoardAccess(db)

    def _find_membership(self, board_id: int, user_id: int) -> BoardMembership | None:
        return (
            self.db.query(BoardMembership)
            .filter(BoardMembership.board_id == board_id, BoardMembership.user_id == user_id)
            .first()
        )

    def _visible_boards(self, user_id: int) -> Query:
        return self.db.query(Board).filter(is_member(user_id), Board.deleted_at.is_(None))

    def create(self, name: str, owner_user_id: int) -> Board:
        """Create a board and the creator's OWNER membership in one transaction."""
        board = Board(name=name)
        board.memberships.append(BoardMembership(user_id=owner_user_id, role=Role.OWNER.value))
        self.db.add(board)
        self.db.commit()
        self.db.refresh(board)
        logger.info(f"Board {board.id} created by user {owner_user_id}")
        return board

    def find_many(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 10,
        search: str | None = None,
    ) -> BoardPage:
        """Get one page of the boards the user is a member of.

        The count and the page are read from the same filtered query inside
        the session's transaction, so ``meta.total`` matches ``data``.
        """
        query = self._visible_boards(user_id)
        if search:
            query = query.filter(Board.name.icontains(search, autoescape=True))

        total = query.count()
        boards = (
            query.order_by(Board.created_at, Board.id)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )

        return BoardPage(
            data=[BoardResponse.model_validate(board) for board in boards],
            meta=PageMeta(
                total=total,
                page=page,
                limit=limit,
                total_pages=math.ceil(total / limit),
            ),
        )

    def find_one(self, board_id: int, user_id: int) -> Board:
        """Get a board visible to the user.

        Missing, deleted and not-a-member all raise the same NotFoundError so
        that board existence never leaks to outsiders.
        """
        board = self._visible_boards(user_id).filter(Board.id == board_id).first()
        if board is None:
            raise NotFoundError(f"Board with ID {board_id} not found")
        return board

    def update(self, board_id: int, changes: dict, user_id: int) -> Board:
        """Apply a partial update to a board the user can see."""
        board = self.find_one(board_id, user_id)

        if changes.get("name") is not None:
            board.name = changes["name"]

        self.db.commit()
        self.db.refresh(board)
        return board

    def delete(self, board_id: int, user_id: int) -> None:
        """Soft delete a board with a single conditional update."""
        affected = (
            self.db.query(Board)
            .filter(Board.id == board_id, is_member(user_id), Board.deleted_at.is_(None))
            .update({Board.deleted_at: datetime.now(UTC)}, synchronize_session=False)
        )
        if affected == 0:
            self.db.rollback()
            raise NotFoundError(f"Board with ID #{board_id} not found.")

        self.db.commit()
        logger.info(f"Board {board_id} deleted by user {user_id}")

    def invite_member(
        self,
        board_id: int,
        invitee_email: str,
        role: Role,
        inviter_user_id: int,
    ) -> BoardMembership:
        """Add an existing user to the board with the given role."""
        self.access.resolve_owner_membership(board_id, inviter_user_id)

        invitee = get_user_by_email(self.db, invitee_email)
        if invitee is None:
            raise NotFoundError("User not found")

        if invitee.id == inviter_user_id:
            raise BadRequestError("Cannot invite yourself")

        if self._find_membership(board_id, invitee.id):
            raise BadRequestError("User is already a member")

        membership = BoardMembership(board_id=board_id, user_id=invitee.id, role=Role(role).value)
        self.db.add(membership)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent invite created the row after the check above
            self.db.rollback()
            raise BadRequestError("User is already a member") from None
        self.db.refresh(membership)
        logger.info(f"User {invitee.id} invited to board {board_id} as {membership.role}")
        return membership

    def list_members(self, board_id: int, user_id: int) -> list[BoardMembership]:
        """Get the memberships of a board the user can see."""
        self.find_one(board_id, user_id)
        return (
            self.db.query(BoardMembership)
            .filter(BoardMembership.board_id == board_id)
            .order_by(BoardMembership.id)
            .all()
        )
