"""
Role-based access policy.

Roles are compared by exact match. There is no hierarchy: an admin does
not satisfy an instructor requirement unless stored as instructor.
Nothing is cached, so a role change applies to the next request.
"""

import asyncio
import logging
from typing import Callable, Optional

from shared.exceptions import StorageTimeoutError
from shared.models import Claims, UserRole
from shared.repository import run_blocking
from modules.users.models import User

from .models import AccessDecision, DenyReason
from .exceptions import UnknownUserError, RoleMismatchError

logger = logging.getLogger(__name__)

UserLookup = Callable[[str], Optional[User]]


def authorize(
    claims: Claims,
    required_role: UserRole,
    find_user_by_email: UserLookup,
) -> AccessDecision:
    """
    Decide whether the token's subject holds the required role.

    Args:
        claims: Verified token claims
        required_role: Role the route requires
        find_user_by_email: Blocking user lookup

    Returns:
        AccessDecision, allowed iff the stored role equals required_role
    """
    user = find_user_by_email(claims.email)
    if user is None:
        return AccessDecision.deny(required_role, DenyReason.UNKNOWN_USER)
    if user.role != required_role:
        return AccessDecision.deny(required_role, DenyReason.ROLE_MISMATCH, user)
    return AccessDecision.allow(required_role, user)


class AccessPolicy:
    """
    Async wrapper around authorize() for the API layer.

    The user lookup runs in a worker thread bounded by timeout.
    """

    def __init__(self, find_user_by_email: UserLookup, timeout: Optional[float] = None):
        self._find_user_by_email = find_user_by_email
        self._timeout = timeout

    async def evaluate(self, claims: Claims, required_role: UserRole) -> AccessDecision:
        """Evaluate the policy without raising on deny."""
        try:
            return await run_blocking(
                authorize,
                claims,
                required_role,
                self._find_user_by_email,
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            raise StorageTimeoutError("user_store", self._timeout)

    async def enforce(self, claims: Claims, required_role: UserRole) -> User:
        """
        Evaluate the policy and raise on deny.

        Returns:
            The resolved user

        Raises:
            UnknownUserError: No user for claims.email
            RoleMismatchError: Stored role differs from required_role
        """
        decision = await self.evaluate(claims, required_role)
        if decision.allowed:
            return decision.user

        logger.info(
            f"Denied {claims.email} for role {required_role.value}: {decision.reason.value}"
        )
        if decision.reason == DenyReason.UNKNOWN_USER:
            raise UnknownUserError(claims.email)
        raise RoleMismatchError(required_role.value, decision.user.role.value)
