"""Column schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ColumnCreate(BaseModel):
    """Create a new column."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)


class ColumnUpdate(BaseModel):
    """Rename a column."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1, max_length=255)


class ColumnResponse(BaseModel):
    """Column response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    order: int
    created_at: datetime
    updated_at: datetime
