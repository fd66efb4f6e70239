"""Centralized validation functions.

Validators are pure functions. The ``validate_*`` functions raise
ValueError so they can back pydantic Annotated types; the password policy
also exposes the full list of violations so handlers can report every
unmet requirement at once.
"""

import re

MIN_PASSWORD_LENGTH = 6

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_email(v: str) -> str:
    """Validate email format.

    Returns:
        Email stripped of surrounding whitespace.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email(" owner@kennel.com ")
        'owner@kennel.com'
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError(f"Invalid email format: {v}")
    return v


def password_policy_violations(password: str) -> list[str]:
    """List every password requirement the candidate fails.

    Policy: at least six characters with an uppercase letter, a lowercase
    letter and a digit. Special characters are allowed but not required.

    Example:
        >>> password_policy_violations("abc")
        ['at least 6 characters', 'an uppercase letter', 'a digit']
    """
    violations: list[str] = []
    if len(password) < MIN_PASSWORD_LENGTH:
        violations.append(f"at least {MIN_PASSWORD_LENGTH} characters")
    if not any(c.isupper() for c in password):
        violations.append("an uppercase letter")
    if not any(c.islower() for c in password):
        violations.append("a lowercase letter")
    if not any(c.isdigit() for c in password):
        violations.append("a digit")
    return violations


def describe_password_violations(violations: list[str]) -> str:
    return "Password must contain " + ", ".join(violations) + "."


def validate_strong_password(v: str) -> str:
    """Validate password strength.

    Raises:
        ValueError: Naming every unmet requirement.
    """
    violations = password_policy_violations(v)
    if violations:
        raise ValueError(describe_password_violations(violations))
    return v
