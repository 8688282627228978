"""
Cart endpoints.

A cart entry ties the caller to a class before payment. Entries are
removed by the enrollment coordinator once payment completes, or here.
"""

from uuid import UUID

from fastapi import APIRouter, Depends

from shared.models import Claims
from modules.classes.models import AddToCartRequest, CartEntry
from modules.classes.service import ClassService
from ..dependencies import get_class_service
from ..middleware.auth import get_current_claims

router = APIRouter()


@router.post("", response_model=CartEntry, status_code=201)
async def add_to_cart(
    request: AddToCartRequest,
    claims: Claims = Depends(get_current_claims),
    service: ClassService = Depends(get_class_service),
) -> CartEntry:
    """Add a class to the caller's cart."""
    return await service.add_to_cart(request, claims.email)


@router.delete("/{class_id}", status_code=204)
async def remove_from_cart(
    class_id: UUID,
    claims: Claims = Depends(get_current_claims),
    service: ClassService = Depends(get_class_service),
) -> None:
    """Remove a class from the caller's cart."""
    await service.remove_from_cart(str(class_id), claims.email)
