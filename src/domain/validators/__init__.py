"""Validators package exports."""

from src.domain.validators.functions import (
    MIN_PASSWORD_LENGTH,
    describe_password_violations,
    password_policy_violations,
    validate_email,
    validate_strong_password,
)

__all__ = [
    "MIN_PASSWORD_LENGTH",
    "describe_password_violations",
    "password_policy_violations",
    "validate_email",
    "validate_strong_password",
]
