"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (integer id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for models that are edited after creation

Domain entities never inherit from these classes; repositories map
between models and entities.

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at via TimestampMixin)
            ├── UserModel (overrides id with a UUID)
            ├── CustomerModel
            ├── DogModel
            ├── KennelModel
            └── BookingModel
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: autoincrement integer primary key (UserModel overrides it)
    - created_at: insert timestamp set by the database
    """

    __abstract__ = True
    # Server-side timestamps are fetched at flush time; async sessions cannot lazy-load them
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[Any] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True
