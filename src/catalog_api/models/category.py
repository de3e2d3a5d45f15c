"""Category table definition."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import ClassVar, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

ACTIVE_STATUS = 1

# Attributes callers may assign on create/update; everything else is store-managed.
FILLABLE_FIELDS: tuple[str, ...] = ("name", "status")
NAME_MAX_LENGTH = 255

# Signed 64-bit range of SQLite INTEGER columns
INTEGER_MIN = -(2**63)
INTEGER_MAX = 2**63 - 1


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)


class Category(SQLModel, table=True):
    """A named category with an integer status flag (1 = active)."""

    __tablename__: ClassVar[str] = "category"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=NAME_MAX_LENGTH)
    status: int = Field(default=ACTIVE_STATUS, nullable=False, index=True)
    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
    )
