"""User queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class ListUsers:
    caller: Caller | None


@dataclass(frozen=True, kw_only=True)
class GetUser:
    caller: Caller | None
    user_id: UUID
