"""Application-level error helpers.

Handlers return core DomainError subclasses; these helpers keep the
messages for the common cases identical across resources.
"""

from src.application.errors.resource_errors import (
    id_mismatch,
    invalid_reference,
    not_found,
)

__all__ = ["id_mismatch", "invalid_reference", "not_found"]
