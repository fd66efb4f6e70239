"""Password hashing protocol for domain layer.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("Secret1")
        ok = password_service.verify_password("Secret1", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password with a random salt."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            True on match. False on mismatch or a malformed hash.
        """
        ...
