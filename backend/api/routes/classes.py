"""
Class endpoints.

Instructors create classes; admins review them.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from modules.classes.models import ClassRecord, ClassStatusUpdate, CreateClassRequest
from modules.classes.service import ClassService
from modules.users.models import User
from ..dependencies import get_class_service
from ..middleware.auth import RequireAdmin, RequireInstructor

router = APIRouter()


@router.post("", response_model=ClassRecord, status_code=201)
async def create_class(
    request: CreateClassRequest,
    instructor: User = RequireInstructor,
    service: ClassService = Depends(get_class_service),
) -> ClassRecord:
    """
    Create a class owned by the caller, pending admin review.

    Requires the instructor role.
    """
    return await service.create_class(request, instructor.email)


@router.patch("/{class_id}/status", response_model=ClassRecord)
async def change_class_status(
    class_id: UUID,
    update: ClassStatusUpdate,
    admin: User = RequireAdmin,
    service: ClassService = Depends(get_class_service),
) -> ClassRecord:
    """
    Approve or reject a class, with an optional reason.

    Requires the admin role.
    """
    return await service.review_class(str(class_id), update)
