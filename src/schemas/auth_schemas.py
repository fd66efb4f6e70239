"""Authentication request/response schemas.

Endpoints:
    POST /api/auth/register - Create an account (200, message only)
    POST /api/auth/login    - Exchange credentials for a JWT
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.types import Email, PersonName


class RegisterRequest(BaseModel):
    """Request schema for registration.

    The password policy is checked by the handler so that every unmet
    requirement is reported in one message.
    """

    email: Email
    password: str = Field(..., max_length=128, examples=["Secure123"])
    first_name: PersonName
    last_name: PersonName
    role: str = Field(
        default="Customer",
        description="Admin, Staff or Customer",
        examples=["Customer"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "owner@kennel.com",
                "password": "Secure123",
                "first_name": "Jane",
                "last_name": "Doe",
                "role": "Customer",
            }
        }
    )


class LoginRequest(BaseModel):
    email: Email
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    """Successful login.

    The token is sent back as ``Authorization: Bearer <token>``.
    """

    token: str = Field(..., description="JWT access token")
    email: str
    role: str
