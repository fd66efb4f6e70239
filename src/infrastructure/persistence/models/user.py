"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
"""

from uuid import UUID

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from uuid_extensions import uuid7

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """Login account.

    Fields:
        id: UUID primary key (uuid7, overrides the integer base id)
        first_name, last_name: Display name parts
        email: Unique login email
        password_hash: bcrypt hash
        role: Role name (Admin, Staff, Customer)
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
