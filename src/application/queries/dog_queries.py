"""Dog queries."""

from dataclasses import dataclass

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class ListDogs:
    """List dogs; Customer callers only see their own."""

    caller: Caller | None


@dataclass(frozen=True, kw_only=True)
class GetDog:
    caller: Caller | None
    dog_id: int
