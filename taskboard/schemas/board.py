"""Board and membership schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from taskboard.models.enums import Role


class BoardCreate(BaseModel):
    """Create a new board."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)


class BoardUpdate(BaseModel):
    """Update a board. Omitted fields are left unchanged."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=255)


class BoardResponse(BaseModel):
    """Board response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class PageMeta(BaseModel):
    """Pagination metadata."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")


class BoardPage(BaseModel):
    """One page of boards visible to the caller."""

    data: list[BoardResponse]
    meta: PageMeta


class MemberInvite(BaseModel):
    """Invite an existing user to a board."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr = Field(..., max_length=255)
    role: Role


class MembershipResponse(BaseModel):
    """Board membership response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    board_id: int
    role: Role
    created_at: datetime


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
