"""Kennel commands."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class CreateKennel:
    caller: Caller | None
    name: str
    size: str
    is_available: bool
    price_per_day: Decimal


@dataclass(frozen=True, kw_only=True)
class UpdateKennel:
    caller: Caller | None
    kennel_id: int
    payload_id: int
    name: str
    size: str
    is_available: bool
    price_per_day: Decimal


@dataclass(frozen=True, kw_only=True)
class DeleteKennel:
    caller: Caller | None
    kennel_id: int
