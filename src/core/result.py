"""Result types for railway-oriented programming.

Handlers and services return a Result instead of raising for expected
failures (not found, forbidden, duplicate email). Routers inspect the
Result and turn failures into HTTP responses.

Usage:
    async def handle(self, query: GetDog) -> Result[Dog, DomainError]:
        dog = await self._dogs.find_by_id(query.dog_id)
        if dog is None:
            return Failure(error=NotFoundError(...))
        return Success(value=dog)

    match await handler.handle(query):
        case Success(value=dog):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error."""

    error: E


Result = Success[T] | Failure[E]
