"""
Enrollment endpoints.
"""

from fastapi import APIRouter, Depends

from shared.models import Claims
from modules.enrollment.interfaces import IEnrollmentService
from modules.enrollment.models import EnrollmentRecord
from modules.users.models import User
from ..dependencies import get_enrollment_service
from ..middleware.auth import get_current_claims, RequireInstructor

router = APIRouter()


@router.get("/me", response_model=list[EnrollmentRecord])
async def list_my_enrollments(
    claims: Claims = Depends(get_current_claims),
    service: IEnrollmentService = Depends(get_enrollment_service),
) -> list[EnrollmentRecord]:
    """List the caller's enrollments, most recent first."""
    return await service.list_enrollments(claims.email)


@router.get("", response_model=list[EnrollmentRecord])
async def list_all_enrollments(
    instructor: User = RequireInstructor,
    service: IEnrollmentService = Depends(get_enrollment_service),
) -> list[EnrollmentRecord]:
    """
    List every enrollment.

    Requires the instructor role.
    """
    return await service.list_enrollments()
