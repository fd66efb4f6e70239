"""Runtime environments for the kennel API.

Settings uses the environment to pick the log renderer and demo seeding
defaults.
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Machine-readable logs everywhere except local development."""
        return self is not Environment.DEVELOPMENT
