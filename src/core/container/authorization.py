"""Authorization dependency factories.

The role matrix is a Casbin enforcer loaded once from the model and
policy files packaged with the authorization adapter. The access policy
that combines it with ownership scope is request-scoped because it reads
the caller's customer profile through the request session.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    import casbin

    from src.application.services.access_policy import AccessPolicy
    from src.domain.protocols.authorization_protocol import AuthorizationProtocol


@lru_cache()
def get_enforcer() -> "casbin.Enforcer":
    """Get Casbin enforcer singleton (app-scoped)."""
    from src.infrastructure.authorization.casbin_adapter import create_enforcer

    return create_enforcer()


@lru_cache()
def get_role_matrix() -> "AuthorizationProtocol":
    """Get the role matrix (Casbin adapter) singleton."""
    from src.infrastructure.authorization.casbin_adapter import CasbinAdapter

    return CasbinAdapter(enforcer=get_enforcer(), logger=get_logger())


async def get_access_policy(
    session: AsyncSession = Depends(get_db_session),
) -> "AccessPolicy":
    """Get access policy (request-scoped).

    Usage:
        policy: AccessPolicy = Depends(get_access_policy)
    """
    from src.application.services.access_policy import AccessPolicy
    from src.infrastructure.persistence.repositories import (
        CustomerRepository,
        DogRepository,
    )

    return AccessPolicy(
        matrix=get_role_matrix(),
        customer_repo=CustomerRepository(session=session),
        dog_repo=DogRepository(session=session),
        logger=get_logger(),
    )
