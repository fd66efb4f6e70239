"""Access policy service.

Single entry point for every authorization decision in the API. It
combines the role matrix (which role may perform which action on which
resource) with the caller's ownership scope.

Ownership Chain:
    User → Customer (via user_id) → Dog (via customer_id) → Booking (via dog_id)

Decision flow:
    1. authorize(caller, resource, action)
       - anonymous caller → AuthenticationError
       - no grant for the role → AuthorizationError
       - scoped grant → ownership scope resolved once and attached to the grant
    2. authorize_target(grant, target, current=None)
       Checks a concrete record (or create/update payload) against the grant.

Scoped outcomes differ by action:
    - list: never an error; a caller without a profile gets an empty scope
    - read/update of a record outside the scope: AuthorizationError
    - create without a profile, or referencing another customer's records:
      ValidationError

Usage:
    match await policy.authorize(caller, Resource.DOGS, Action.READ):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=grant):
            ...
    dog = await dogs.find_by_id(dog_id)
    checked = policy.authorize_target(grant, dog)
"""

from dataclasses import dataclass, field, replace
from typing import Any, TypeVar

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import Booking, Customer, Dog, User
from src.domain.enums import AccessDecision, Action, Resource
from src.domain.protocols import (
    AuthorizationProtocol,
    CustomerRepository,
    DogRepository,
    LoggerProtocol,
)
from src.domain.value_objects import Caller

T = TypeVar("T")

PROFILE_MISSING_MESSAGE = "Customer profile not found. Please contact administrator."
FOREIGN_DOG_MESSAGE = "You can only register dogs under your own customer profile."
FOREIGN_BOOKING_MESSAGE = "You can only create bookings for your own dogs."
SELF_DELETE_MESSAGE = (
    "You cannot delete your own account. Please ask another administrator."
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CallerScope:
    """Records a caller may act on.

    Attributes:
        unrestricted: True for unscoped grants (every record visible).
        customer_id: The caller's Customer profile, if any.
        dog_ids: Dogs owned by that profile.
    """

    unrestricted: bool
    customer_id: int | None = None
    dog_ids: frozenset[int] = field(default_factory=frozenset)

    @classmethod
    def everything(cls) -> "CallerScope":
        return cls(unrestricted=True)

    @property
    def has_profile(self) -> bool:
        return self.customer_id is not None

    def owns_dog(self, dog_id: int | None) -> bool:
        if self.unrestricted:
            return True
        return dog_id is not None and dog_id in self.dog_ids

    def owns_customer(self, customer_id: int | None) -> bool:
        if self.unrestricted:
            return True
        return customer_id is not None and customer_id == self.customer_id


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessGrant:
    """Permission granted by authorize(), with its scope."""

    caller: Caller
    resource: Resource
    action: Action
    decision: AccessDecision
    scope: CallerScope

    @property
    def scoped(self) -> bool:
        return self.decision is AccessDecision.ALLOW_WITH_SCOPE


class AccessPolicy:
    """Role and ownership based access decisions.

    Dependencies (injected via constructor):
        - AuthorizationProtocol: role matrix (Casbin)
        - CustomerRepository: caller → customer profile
        - DogRepository: customer → owned dog ids
        - LoggerProtocol: decision log
    """

    def __init__(
        self,
        matrix: AuthorizationProtocol,
        customer_repo: CustomerRepository,
        dog_repo: DogRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._matrix = matrix
        self._customer_repo = customer_repo
        self._dog_repo = dog_repo
        self._logger = logger

    async def authorize(
        self,
        caller: Caller | None,
        resource: Resource,
        action: Action,
    ) -> Result[AccessGrant, DomainError]:
        """Decide whether a caller may perform an action on a resource type.

        Returns:
            Success(AccessGrant) with the resolved scope, or Failure with
            AuthenticationError (anonymous) / AuthorizationError (denied).
        """
        if caller is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_REQUIRED,
                    message="Authentication required.",
                )
            )

        decision = (
            self._matrix.decide(caller.role, resource, action)
            if caller.role is not None
            else AccessDecision.DENY
        )

        self._logger.info(
            "access_decision",
            user_id=str(caller.user_id),
            role=caller.role.value if caller.role else None,
            resource=resource.value,
            action=action.value,
            decision=decision.value,
        )

        if decision is AccessDecision.DENY:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.PERMISSION_DENIED,
                    message=f"You do not have permission to {action.value} {resource.value}.",
                    required_permission=f"{resource.value}:{action.value}",
                )
            )

        scope = (
            await self.resolve_scope(caller)
            if decision is AccessDecision.ALLOW_WITH_SCOPE
            else CallerScope.everything()
        )
        return Success(
            value=AccessGrant(
                caller=caller,
                resource=resource,
                action=action,
                decision=decision,
                scope=scope,
            )
        )

    async def resolve_scope(self, caller: Caller) -> CallerScope:
        """Walk User → Customer → Dogs once for the caller."""
        customer = await self._customer_repo.find_by_user_id(caller.user_id)
        if customer is None or customer.id is None:
            return CallerScope(unrestricted=False)

        dog_ids = await self._dog_repo.list_ids_by_customer(customer.id)
        return CallerScope(
            unrestricted=False,
            customer_id=customer.id,
            dog_ids=frozenset(dog_ids),
        )

    def authorize_target(
        self,
        grant: AccessGrant,
        target: T,
        current: Any = None,
    ) -> Result[T, DomainError]:
        """Check a concrete record against a grant.

        Args:
            grant: Grant returned by authorize().
            target: Record being read or deleted, or the payload being
                created or written.
            current: Stored record an update replaces, when different
                from target.

        Returns:
            Success with the target to use. For scoped dog writes the
            ownership field is overwritten with the caller's own profile.
        """
        if (
            grant.resource is Resource.USERS
            and grant.action is Action.DELETE
            and isinstance(target, User)
            and target.id == grant.caller.user_id
        ):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.SELF_DELETION_FORBIDDEN,
                    message=SELF_DELETE_MESSAGE,
                    resource_type="User",
                )
            )

        if not grant.scoped:
            return Success(value=target)

        result = self._check_scoped(grant, target, current)
        if isinstance(result, Failure):
            self._logger.warning(
                "access_denied_for_target",
                user_id=str(grant.caller.user_id),
                resource=grant.resource.value,
                action=grant.action.value,
                reason=result.error.code.value,
            )
        return result

    def _check_scoped(
        self, grant: AccessGrant, target: Any, current: Any
    ) -> Result[Any, DomainError]:
        scope = grant.scope
        action = grant.action

        if action is Action.LIST:
            return Success(value=target)

        if action is Action.CREATE:
            if not scope.has_profile:
                return _validation(ErrorCode.CUSTOMER_PROFILE_MISSING, PROFILE_MISSING_MESSAGE)
            if isinstance(target, Dog):
                if target.customer_id is not None and not scope.owns_customer(
                    target.customer_id
                ):
                    return _validation(
                        ErrorCode.CROSS_CUSTOMER_REFERENCE, FOREIGN_DOG_MESSAGE
                    )
                return Success(value=replace(target, customer_id=scope.customer_id))
            if isinstance(target, Booking):
                if not scope.owns_dog(target.dog_id):
                    return _validation(
                        ErrorCode.CROSS_CUSTOMER_REFERENCE, FOREIGN_BOOKING_MESSAGE
                    )
                return Success(value=target)

        if action is Action.READ:
            if self._owns(grant, target):
                return Success(value=target)
            return _forbidden(grant)

        if action is Action.UPDATE:
            stored = current if current is not None else target
            if not self._owns(grant, stored):
                return _forbidden(grant)
            if isinstance(target, Dog):
                return Success(value=replace(target, customer_id=scope.customer_id))
            if isinstance(target, Booking) and not scope.owns_dog(target.dog_id):
                return _forbidden(grant)
            return Success(value=target)

        return _forbidden(grant)

    def _owns(self, grant: AccessGrant, record: Any) -> bool:
        scope = grant.scope
        match record:
            case Dog():
                return scope.owns_dog(record.id)
            case Booking():
                return scope.owns_dog(record.dog_id)
            case Customer():
                return scope.owns_customer(record.id) or (
                    record.user_id is not None
                    and record.user_id == grant.caller.user_id
                )
            case User():
                return record.id == grant.caller.user_id
            case _:
                return False


def _validation(code: ErrorCode, message: str) -> Failure[ValidationError]:
    return Failure(error=ValidationError(code=code, message=message))


def _forbidden(grant: AccessGrant) -> Failure[AuthorizationError]:
    return Failure(
        error=AuthorizationError(
            code=ErrorCode.RESOURCE_NOT_OWNED,
            message=f"You do not have access to this record in {grant.resource.value}.",
            required_permission=f"{grant.resource.value}:{grant.action.value}",
        )
    )
