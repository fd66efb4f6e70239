"""Repository implementations (SQLAlchemy adapters for domain ports)."""

from src.infrastructure.persistence.repositories.booking_repository import (
    BookingRepository,
)
from src.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from src.infrastructure.persistence.repositories.dog_repository import DogRepository
from src.infrastructure.persistence.repositories.kennel_repository import (
    KennelRepository,
)
from src.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "BookingRepository",
    "CustomerRepository",
    "DogRepository",
    "KennelRepository",
    "UserRepository",
]
