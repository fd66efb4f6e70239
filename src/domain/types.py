"""Annotated types with centralized validation.

Usage:
    from src.domain.types import Email, Money

    class CustomerCreateRequest(BaseModel):
        email: Email
"""

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import validate_email

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["owner@kennel.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address with format validation (case preserved)."""

Money = Annotated[
    Decimal,
    Field(ge=0, max_digits=10, decimal_places=2, examples=["45.00"]),
]
"""Non-negative amount with two decimal places."""

PersonName = Annotated[
    str,
    Field(min_length=1, max_length=100, examples=["Jane"]),
]
