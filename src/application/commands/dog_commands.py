"""Dog commands."""

from dataclasses import dataclass

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class CreateDog:
    """Register a dog.

    Attributes:
        customer_id: Owner. Customer callers may omit it; it is always set
            to their own profile.
    """

    caller: Caller | None
    name: str
    breed: str
    age: int
    customer_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateDog:
    caller: Caller | None
    dog_id: int
    payload_id: int
    name: str
    breed: str
    age: int
    customer_id: int | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteDog:
    caller: Caller | None
    dog_id: int
