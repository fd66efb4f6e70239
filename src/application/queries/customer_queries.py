"""Customer queries."""

from dataclasses import dataclass

from src.domain.value_objects import Caller


@dataclass(frozen=True, kw_only=True)
class ListCustomers:
    caller: Caller | None


@dataclass(frozen=True, kw_only=True)
class GetCustomer:
    """Fetch one customer. Customer callers may read only their own profile."""

    caller: Caller | None
    customer_id: int
