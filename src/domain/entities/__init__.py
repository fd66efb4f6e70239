"""Domain entities.

Plain dataclasses mapped to and from persistence models by repositories.
"""

from src.domain.entities.booking import Booking
from src.domain.entities.customer import Customer
from src.domain.entities.dog import Dog
from src.domain.entities.kennel import Kennel
from src.domain.entities.user import User

__all__ = [
    "Booking",
    "Customer",
    "Dog",
    "Kennel",
    "User",
]
