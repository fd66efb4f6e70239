"""Dog database model."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Dog(BaseMutableModel):
    """Boarded dog, optionally owned by a customer.

    Customer deletion is blocked while dogs reference it, so the foreign
    key carries no ON DELETE action.
    """

    __tablename__ = "dogs"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    breed: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    customer_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("customers.id"),
        index=True,
        nullable=True,
    )
