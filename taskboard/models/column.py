"""Board column model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from taskboard.database import Base
from taskboard.models.mixins import SoftDeleteMixin, TimestampMixin


class BoardColumn(Base, TimestampMixin, SoftDeleteMixin):
    """Ordered column within a board."""

    __tablename__ = "columns"

    id = Column(Integer, primary_key=True, index=True)
    board_id = Column(Integer, ForeignKey("boards.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    # Display position, assigned as count + 1 on creation. Not unique.
    order = Column(Integer, nullable=False, default=1)

    # Relationships
    board = relationship("Board", back_populates="columns")
    tasks = relationship("Task", back_populates="column", cascade="all, delete-orphan")
