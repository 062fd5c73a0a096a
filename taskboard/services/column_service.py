"""Column ordering service."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.errors import ForbiddenError
from taskboard.models.column import BoardColumn
from taskboard.services.board_access import BoardAccess

logger = logging.getLogger(__name__)


class ColumnService:
    """Service for the ordered columns of a board."""

    def __init__(self, db: Session, access: BoardAccess | None = None):
        self.db = db
        self.access = access or BoardAccess(db)

    def get_column(self, board_id: int, column_id: int, user_id: int) -> BoardColumn:
        """Get an active column that belongs to the given board.

        A missing column and a column from another board both raise
        ForbiddenError: the path combination is invalid either way.
        """
        self.access.check_access(board_id, user_id)

        column = (
            self.db.query(BoardColumn)
            .filter(BoardColumn.id == column_id, BoardColumn.deleted_at.is_(None))
            .first()
        )
        if column is None or column.board_id != board_id:
            raise ForbiddenError("Column not found on this board.")
        return column

    def create(self, board_id: int, name: str, user_id: int) -> BoardColumn:
        """Append a column to the end of the board."""
        self.access.check_access(board_id, user_id)

        # Deleted columns still count, so positions are never reused.
        column_count = (
            self.db.query(func.count(BoardColumn.id))
            .filter(BoardColumn.board_id == board_id)
            .scalar()
        )

        column = BoardColumn(board_id=board_id, name=name, order=(column_count or 0) + 1)
        self.db.add(column)
        self.db.commit()
        self.db.refresh(column)
        logger.info(f"Column {column.id} created on board {board_id} at position {column.order}")
        return column

    def find_all(self, board_id: int, user_id: int) -> list[BoardColumn]:
        """Get the active columns of a board in display order."""
        self.access.check_access(board_id, user_id)

        return (
            self.db.query(BoardColumn)
            .filter(BoardColumn.board_id == board_id, BoardColumn.deleted_at.is_(None))
            .order_by(BoardColumn.order, BoardColumn.id)
            .all()
        )

    def update(self, board_id: int, column_id: int, changes: dict, user_id: int) -> BoardColumn:
        """Rename a column."""
        column = self.get_column(board_id, column_id, user_id)

        if changes.get("name") is not None:
            column.name = changes["name"]

        self.db.commit()
        self.db.refresh(column)
        return column

    def remove(self, board_id: int, column_id: int, user_id: int) -> BoardColumn:
        """Soft delete a column. Its tasks stay in place but become unreachable."""
        column = self.get_column(board_id, column_id, user_id)

        column.soft_delete()
        self.db.commit()
        self.db.refresh(column)
        logger.info(f"Column {column_id} deleted from board {board_id}")
        return column
