"""Declarative base for the account tables.

Every table gets a database-assigned integer id and a created_at stamp from
BaseModel. Tables whose rows change after insert (users, roles) extend
BaseMutableModel, which adds updated_at.

    BaseModel (id, created_at)
        └── BaseMutableModel (+ updated_at)
            ├── models.Role
            └── models.User

Only repositories touch these classes; domain entities never inherit from
them.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Registry base; columns here are copied onto every mapped table."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds updated_at, bumped by the database on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    __abstract__ = True
