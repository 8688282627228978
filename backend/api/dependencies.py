"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations with explicit
configuration taken from settings.
"""

from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.access.policy import AccessPolicy
    from modules.billing.interfaces import IPaymentGateway
    from modules.classes.service import ClassService
    from modules.enrollment.interfaces import IEnrollmentService
    from modules.users.interfaces import IUserStore
    from modules.users.service import UserService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear all cached services for
    testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._user_store: "IUserStore | None" = None
        self._user_service: "UserService | None" = None
        self._access_policy: "AccessPolicy | None" = None
        self._class_service: "ClassService | None" = None
        self._enrollment_service: "IEnrollmentService | None" = None
        self._payment_gateway: "IPaymentGateway | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        from modules.auth.service import get_auth_service
        return get_auth_service()

    @property
    def users(self) -> "IUserStore":
        """Get the user store."""
        if self._user_store is None:
            from modules.users.repository import UserRepository
            self._user_store = UserRepository(self.db)
        return self._user_store

    @property
    def user_service(self) -> "UserService":
        """Get the user service."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                self.users,
                timeout=get_settings().storage_timeout_seconds,
            )
        return self._user_service

    @property
    def access(self) -> "AccessPolicy":
        """Get the access policy evaluator."""
        if self._access_policy is None:
            from modules.access.policy import AccessPolicy
            self._access_policy = AccessPolicy(
                self.users.find_by_email,
                timeout=get_settings().storage_timeout_seconds,
            )
        return self._access_policy

    @property
    def classes(self) -> "ClassService":
        """Get the class catalog service."""
        if self._class_service is None:
            from modules.classes.repository import ClassRepository
            from modules.classes.service import ClassService
            self._class_service = ClassService(
                ClassRepository(self.db),
                timeout=get_settings().storage_timeout_seconds,
            )
        return self._class_service

    @property
    def enrollment(self) -> "IEnrollmentService":
        """Get the enrollment coordinator."""
        if self._enrollment_service is None:
            from modules.enrollment.repository import EnrollmentRepository
            from modules.enrollment.service import EnrollmentCoordinator
            self._enrollment_service = EnrollmentCoordinator(
                EnrollmentRepository(self.db),
                timeout=get_settings().storage_timeout_seconds,
            )
        return self._enrollment_service

    @property
    def payments(self) -> "IPaymentGateway":
        """Get the payment gateway."""
        if self._payment_gateway is None:
            from modules.billing.service import StripePaymentGateway
            settings = get_settings()
            self._payment_gateway = StripePaymentGateway(
                secret_key=settings.stripe_secret_key,
                currency=settings.payment_currency,
                timeout=settings.storage_timeout_seconds,
            )
        return self._payment_gateway

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._user_store = None
        self._user_service = None
        self._access_policy = None
        self._class_service = None
        self._enrollment_service = None
        self._payment_gateway = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for the auth service."""
    return get_container().auth


def get_user_service() -> "UserService":
    """FastAPI dependency for the user service."""
    return get_container().user_service


def get_access_policy() -> "AccessPolicy":
    """FastAPI dependency for the access policy."""
    return get_container().access


def get_class_service() -> "ClassService":
    """FastAPI dependency for the class catalog service."""
    return get_container().classes


def get_enrollment_service() -> "IEnrollmentService":
    """FastAPI dependency for the enrollment coordinator."""
    return get_container().enrollment


def get_payment_gateway() -> "IPaymentGateway":
    """FastAPI dependency for the payment gateway."""
    return get_container().payments
