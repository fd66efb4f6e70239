"""Casbin implementation of AuthorizationProtocol.

The role matrix is a Casbin RBAC model loaded from two files that ship
with this package:

- model.conf: request (sub, obj, act) matched against policy rows
  (sub, obj, act, scope); ``*`` in a policy row matches anything
- policy.csv: one row per grant; scope ``all`` is an unrestricted grant,
  scope ``own`` limits the caller to records they own

A request with no matching row is denied.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import casbin

from src.domain.enums import AccessDecision, Action, Resource, UserRole

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol

_HERE = Path(__file__).resolve().parent
DEFAULT_MODEL_PATH = _HERE / "model.conf"
DEFAULT_POLICY_PATH = _HERE / "policy.csv"

# Index of the scope field in an explained policy row (sub, obj, act, scope)
_SCOPE_FIELD = 3
SCOPE_OWN = "own"


def create_enforcer(
    model_path: Path = DEFAULT_MODEL_PATH,
    policy_path: Path = DEFAULT_POLICY_PATH,
) -> casbin.Enforcer:
    """Build a synchronous Casbin enforcer from model and policy files."""
    return casbin.Enforcer(str(model_path), str(policy_path))


class CasbinAdapter:
    """Casbin-based role matrix.

    Attributes:
        _enforcer: Loaded Casbin enforcer.
        _logger: Structured logger.
    """

    def __init__(
        self,
        enforcer: casbin.Enforcer,
        logger: "LoggerProtocol",
    ) -> None:
        self._enforcer = enforcer
        self._logger = logger

    def decide(
        self, role: UserRole, resource: Resource, action: Action
    ) -> AccessDecision:
        """Evaluate the grant for a role.

        Fails closed: an enforcer error is logged and treated as DENY.
        """
        try:
            allowed, explain = self._enforcer.enforce_ex(
                role.value, resource.value, action.value
            )
        except Exception as e:
            self._logger.error(
                "authorization_check_error",
                error=e,
                role=role.value,
                resource=resource.value,
                action=action.value,
            )
            return AccessDecision.DENY

        if not allowed:
            decision = AccessDecision.DENY
        elif len(explain) > _SCOPE_FIELD and explain[_SCOPE_FIELD] == SCOPE_OWN:
            decision = AccessDecision.ALLOW_WITH_SCOPE
        else:
            decision = AccessDecision.ALLOW

        self._logger.debug(
            "authorization_matrix_lookup",
            role=role.value,
            resource=resource.value,
            action=action.value,
            decision=decision.value,
        )
        return decision
