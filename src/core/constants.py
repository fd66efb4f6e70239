"""Constants for internal implementation details.

Environment-specific settings live in ``src/core/config.py``.
"""

BEARER_PREFIX: str = "Bearer "
"""Authorization header prefix for access tokens."""

ERROR_BODY_KEY: str = "error"
"""Key of the message in every error response body."""

HTTP_CLIENT_TIMEOUT_SECONDS: float = 30.0
"""Default timeout for the API client."""

DEFAULT_SESSION_FILE: str = ".kennel_session.json"
"""File name used by the client's JSON session storage."""
