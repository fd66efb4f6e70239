"""Kennel domain entity."""

from dataclasses import dataclass
from decimal import Decimal

# Sizes offered by the kennel front desk. Size is stored as free text so
# other labels are accepted, but these are the ones in use.
KENNEL_SIZES: tuple[str, ...] = ("Small", "Medium", "Large", "Extra Large")


@dataclass
class Kennel:
    """A bookable kennel unit.

    Attributes:
        id: Store-assigned identifier (None until saved)
        name: Kennel label shown to staff
        size: Size label (see KENNEL_SIZES)
        is_available: Whether the kennel accepts new bookings
        price_per_day: Daily boarding price
    """

    name: str
    size: str
    is_available: bool = True
    price_per_day: Decimal = Decimal("0")
    id: int | None = None
