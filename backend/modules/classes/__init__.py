"""
Classes module.

Class catalog (creation and admin review) and the per-user cart.
"""

from .models import (
    ClassStatus,
    ClassRecord,
    CreateClassRequest,
    ClassStatusUpdate,
    CartEntry,
    AddToCartRequest,
)
from .exceptions import ClassNotFoundError, CartEntryNotFoundError, DuplicateCartEntryError

__all__ = [
    "ClassStatus",
    "ClassRecord",
    "CreateClassRequest",
    "ClassStatusUpdate",
    "CartEntry",
    "AddToCartRequest",
    "ClassNotFoundError",
    "CartEntryNotFoundError",
    "DuplicateCartEntryError",
]
