"""Dog request/response schemas."""

from pydantic import BaseModel, Field

from src.domain.entities import Dog


class DogCreateRequest(BaseModel):
    """Customer callers may omit customer_id; their own profile is used."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Rex"])
    breed: str = Field(default="", max_length=100, examples=["Labrador"])
    age: int = Field(default=0, ge=0, le=40)
    customer_id: int | None = None


class DogUpdateRequest(DogCreateRequest):
    id: int


class DogResponse(BaseModel):
    id: int
    name: str
    breed: str
    age: int
    customer_id: int | None = None

    @classmethod
    def from_entity(cls, dog: Dog) -> "DogResponse":
        return cls(
            id=dog.id or 0,
            name=dog.name,
            breed=dog.breed,
            age=dog.age,
            customer_id=dog.customer_id,
        )
