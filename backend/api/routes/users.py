"""
User-related endpoints.

Profile lookup and registration for the caller, plus the admin-only
role change.
"""

from fastapi import APIRouter, Depends

from shared.models import Claims
from modules.users.models import (
    RegisterRequest,
    RoleUpdateRequest,
    User,
    UserProfileResponse,
)
from modules.users.service import UserService
from ..dependencies import get_user_service
from ..middleware.auth import get_current_claims, RequireAdmin

router = APIRouter()


def _to_response(user: User) -> UserProfileResponse:
    return UserProfileResponse(
        email=user.email,
        name=user.name,
        photo_url=user.photo_url,
        role=user.role,
    )


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    claims: Claims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    Get the current user's profile, including the stored role.

    Requires authentication.
    """
    return _to_response(await service.get_user(claims.email))


@router.post("", response_model=UserProfileResponse, status_code=201)
async def register_user(
    request: RegisterRequest,
    claims: Claims = Depends(get_current_claims),
    service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    Register the caller. The email comes from the token and the role
    is always member.
    """
    return _to_response(await service.register(claims.email, request))


@router.patch("/{email}/role", response_model=UserProfileResponse)
async def update_user_role(
    email: str,
    request: RoleUpdateRequest,
    admin: User = RequireAdmin,
    service: UserService = Depends(get_user_service),
) -> UserProfileResponse:
    """
    Change a user's role.

    Requires the admin role.
    """
    return _to_response(await service.set_role(email, request.role))
