"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, DogRepository
"""

# Service protocols
from src.domain.protocols.authorization_protocol import AuthorizationProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.booking_repository import BookingRepository
from src.domain.protocols.customer_repository import CustomerRepository
from src.domain.protocols.dog_repository import DogRepository
from src.domain.protocols.kennel_repository import KennelRepository
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Services
    "AuthorizationProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repositories
    "BookingRepository",
    "CustomerRepository",
    "DogRepository",
    "KennelRepository",
    "UserRepository",
]
