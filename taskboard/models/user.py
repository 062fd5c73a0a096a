"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from taskboard.database import Base
from taskboard.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and board membership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=True)

    # Relationships
    memberships = relationship(
        "BoardMembership", back_populates="user", cascade="all, delete-orphan"
    )
