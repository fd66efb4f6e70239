"""Booking database model."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Booking(BaseMutableModel):
    """Kennel reservation for a dog.

    Both foreign keys cascade: removing a dog or a kennel removes its
    bookings.
    """

    __tablename__ = "bookings"

    dog_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("dogs.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    kennel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("kennels.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    check_in_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    check_out_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    total_cost: Mapped[Decimal] = mapped_column(
        Numeric(10, 2, asdecimal=True),
        nullable=False,
        default=Decimal("0"),
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="Pending")
