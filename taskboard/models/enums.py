"""Enums for model fields."""

from enum import Enum


class Role(str, Enum):
    """Board-scoped permission levels."""

    OWNER = "OWNER"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"

    def can_invite(self) -> bool:
        """Check if this role may invite new members."""
        return self == Role.OWNER
