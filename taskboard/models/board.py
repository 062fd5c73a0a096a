"""Board and membership models."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from taskboard.database import Base
from taskboard.models.enums import Role
from taskboard.models.mixins import SoftDeleteMixin, TimestampMixin


class Board(Base, TimestampMixin, SoftDeleteMixin):
    """Board model, the top-level container for columns and tasks."""

    __tablename__ = "boards"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    memberships = relationship(
        "BoardMembership", back_populates="board", cascade="all, delete-orphan"
    )
    columns = relationship("BoardColumn", back_populates="board", cascade="all, delete-orphan")


class BoardMembership(Base, TimestampMixin):
    """Grants a user a role on a board. A user holds at most one role per board."""

    __tablename__ = "board_memberships"
    __table_args__ = (UniqueConstraint("user_id", "board_id", name="uq_membership_user_board"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    board_id = Column(Integer, ForeignKey("boards.id"), nullable=False, index=True)
    role = Column(String(20), nullable=False, default=Role.MEMBER.value)  # OWNER | MEMBER | VIEWER

    # Relationships
    user = relationship("User", back_populates="memberships")
    board = relationship("Board", back_populates="memberships")
