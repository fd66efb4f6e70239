"""Authorization infrastructure (Casbin role matrix)."""

from src.infrastructure.authorization.casbin_adapter import (
    CasbinAdapter,
    create_enforcer,
)

__all__ = ["CasbinAdapter", "create_enforcer"]
