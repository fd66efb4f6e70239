"""Role matrix protocol.

The role matrix answers one question: what does a role get for a
(resource, action) pair? It knows nothing about ownership; the access
policy service combines its answer with the caller's ownership scope.

Implementations:
    - CasbinAdapter: Casbin enforcer over a file-based policy
"""

from typing import Protocol

from src.domain.enums import AccessDecision, Action, Resource, UserRole


class AuthorizationProtocol(Protocol):
    """Role x resource x action lookup."""

    def decide(
        self, role: UserRole, resource: Resource, action: Action
    ) -> AccessDecision:
        """Look up the grant for a role.

        Returns:
            ALLOW for unrestricted grants, ALLOW_WITH_SCOPE for grants
            limited to the caller's own records, DENY when no grant exists.
        """
        ...
