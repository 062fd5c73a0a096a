"""Task model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from taskboard.database import Base
from taskboard.models.mixins import TimestampMixin


class Task(Base, TimestampMixin):
    """Task card, ordered within its column."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    column_id = Column(Integer, ForeignKey("columns.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=1)

    # Relationships
    column = relationship("BoardColumn", back_populates="tasks")
