"""Dog domain entity."""

from dataclasses import dataclass


@dataclass
class Dog:
    """A dog that can be boarded.

    Attributes:
        id: Store-assigned identifier (None until saved)
        name: Dog's name
        breed: Breed description
        age: Age in years
        customer_id: Owning customer, if assigned
    """

    name: str
    breed: str
    age: int
    customer_id: int | None = None
    id: int | None = None

    def is_owned_by(self, customer_id: int | None) -> bool:
        return customer_id is not None and self.customer_id == customer_id
