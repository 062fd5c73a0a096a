"""Task ordering service."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskboard.errors import NotFoundError
from taskboard.models.column import BoardColumn
from taskboard.models.task import Task
from taskboard.services.board_access import BoardAccess

logger = logging.getLogger(__name__)


class TaskService:
    """Service for the ordered tasks of a column."""

    def __init__(self, db: Session, access: BoardAccess | None = None):
        self.db = db
        self.access = access or BoardAccess(db)

    def _get_board_column(self, board_id: int, column_id: int) -> BoardColumn:
        column = (
            self.db.query(BoardColumn)
            .filter(
                BoardColumn.id == column_id,
                BoardColumn.board_id == board_id,
                BoardColumn.deleted_at.is_(None),
            )
            .first()
        )
        if column is None:
            raise NotFoundError("Column not found on this board.")
        return column

    def create(
        self,
        board_id: int,
        column_id: int,
        title: str,
        description: str | None,
        user_id: int,
    ) -> Task:
        """Append a task to the end of a column."""
        self.access.check_access(board_id, user_id)
        self._get_board_column(board_id, column_id)

        task_count = (
            self.db.query(func.count(Task.id)).filter(Task.column_id == column_id).scalar()
        )

        task = Task(
            column_id=column_id,
            title=title,
            description=description,
            order=(task_count or 0) + 1,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        logger.info(f"Task {task.id} created in column {column_id} at position {task.order}")
        return task

    def find_all(self, board_id: int, column_id: int, user_id: int) -> list[Task]:
        """Get the tasks of a column in display order."""
        self.access.check_access(board_id, user_id)
        self._get_board_column(board_id, column_id)

        return (
            self.db.query(Task)
            .filter(Task.column_id == column_id)
            .order_by(Task.order, Task.id)
            .all()
        )
