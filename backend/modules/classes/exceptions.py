"""
Class catalog exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class ClassNotFoundError(NotFoundError):
    """Raised when a class does not exist."""

    def __init__(self, class_id: str):
        super().__init__(
            f"Class not found: {class_id}",
            code="CLASS_NOT_FOUND",
            details={"class_id": class_id},
        )


class CartEntryNotFoundError(NotFoundError):
    """Raised when removing a cart entry that does not exist."""

    def __init__(self, class_id: str, email: str):
        super().__init__(
            f"Class {class_id} is not in the cart",
            code="CART_ENTRY_NOT_FOUND",
            details={"class_id": class_id, "email": email},
        )


class DuplicateCartEntryError(ConflictError):
    """Raised when a class is already in the user's cart."""

    def __init__(self, class_id: str, email: str):
        super().__init__(
            f"Class {class_id} is already in the cart",
            code="DUPLICATE_CART_ENTRY",
            details={"class_id": class_id, "email": email},
        )
