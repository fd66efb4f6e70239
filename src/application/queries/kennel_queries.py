"""Kennel queries."""

from dataclasses import dataclass

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class ListKennels:
    caller: Caller | None


@dataclass(frozen=True, kw_only=True)
class GetKennel:
    caller: Caller | None
    kennel_id: int
