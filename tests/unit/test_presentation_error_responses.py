"""Unit tests for mapping domain errors to HTTP responses."""

import json

import pytest

from src.application.errors import id_mismatch, invalid_reference, not_found
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
)
from src.presentation.routers.api.errors import ErrorResponseBuilder


@pytest.mark.unit
class TestErrorResponseBuilder:
    @pytest.mark.parametrize(
        ("error", "status_code"),
        [
            (id_mismatch("Dog"), 400),
            (invalid_reference("Kennel", 3), 400),
            (
                ConflictError(
                    code=ErrorCode.CUSTOMER_HAS_DOGS,
                    message="Cannot delete customer.",
                    resource_type="Customer",
                    dependent_count=1,
                ),
                400,
            ),
            (
                AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED, message="Session has expired."
                ),
                401,
            ),
            (
                AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED, message="Denied."
                ),
                403,
            ),
            (not_found("Booking", 9), 404),
            (DomainError(code=ErrorCode.VALIDATION_FAILED, message="Unmapped."), 500),
        ],
    )
    def test_status_code_for(self, error, status_code):
        assert ErrorResponseBuilder.status_code_for(error) == status_code

    def test_body_is_error_message(self):
        response = ErrorResponseBuilder.from_domain_error(not_found("Dog", 7))

        assert response.status_code == 404
        assert json.loads(response.body) == {"error": "Dog not found."}
        assert "www-authenticate" not in response.headers

    def test_unauthorized_carries_bearer_challenge(self):
        response = ErrorResponseBuilder.from_domain_error(
            AuthenticationError(
                code=ErrorCode.AUTHENTICATION_REQUIRED, message="Authentication required."
            )
        )

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"
