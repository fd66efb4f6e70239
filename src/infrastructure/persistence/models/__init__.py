"""Database models for persistence layer.

SQLAlchemy models mapped to tables. Domain entities live in
src/domain/entities/; repositories translate between the two.
"""

from src.infrastructure.persistence.models.booking import Booking
from src.infrastructure.persistence.models.customer import Customer
from src.infrastructure.persistence.models.dog import Dog
from src.infrastructure.persistence.models.kennel import Kennel
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Booking",
    "Customer",
    "Dog",
    "Kennel",
    "User",
]
