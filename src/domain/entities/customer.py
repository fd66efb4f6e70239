"""Customer domain entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Customer:
    """Dog owner known to the kennel.

    A Customer may be linked to a login account through ``user_id``; at
    most one Customer exists per user. Customers created by staff for
    walk-in owners have no linked user.

    Attributes:
        id: Store-assigned identifier (None until saved)
        name: Full display name
        email: Contact email (unique across customers)
        phone: Contact phone, empty when unknown
        user_id: Linked login account, if any
    """

    name: str
    email: str
    phone: str = ""
    user_id: UUID | None = None
    id: int | None = None
