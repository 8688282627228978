"""
Authentication and role gate dependencies.

get_current_claims verifies the bearer token; require_role additionally
checks the caller's stored role. Failures raise domain errors that the
error handlers turn into 401 (token) or 403 (role) responses, so route
bodies never run for rejected requests.
"""

from typing import Callable, Coroutine, Any, Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import Claims, UserRole
from modules.auth.interfaces import IAuthService
from modules.access.policy import AccessPolicy
from modules.users.models import User

from ..dependencies import get_access_policy, get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> Claims:
    """
    Dependency that requires a valid token.

    Usage:
        @router.get("/protected")
        async def protected_route(claims: Claims = Depends(get_current_claims)):
            return {"email": claims.email}
    """
    token = credentials.credentials if credentials else None
    return auth.verify(token)


def require_role(role: UserRole) -> Callable[..., Coroutine[Any, Any, User]]:
    """
    Build a dependency that requires a valid token AND the exact stored role.

    Usage:
        @router.post("/classes")
        async def create(user: User = Depends(require_role(UserRole.INSTRUCTOR))):
            ...
    """

    async def role_dependency(
        claims: Claims = Depends(get_current_claims),
        policy: AccessPolicy = Depends(get_access_policy),
    ) -> User:
        return await policy.enforce(claims, role)

    role_dependency.__name__ = f"require_{role.value}"
    return role_dependency


# Type aliases for cleaner route definitions
RequireAdmin = Depends(require_role(UserRole.ADMIN))
RequireInstructor = Depends(require_role(UserRole.INSTRUCTOR))
