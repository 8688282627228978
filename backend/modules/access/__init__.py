"""
Access module.

Evaluates role requirements against the user store.

Public API:
- authorize: Pure policy decision
- AccessPolicy: Async evaluator used by route dependencies
- AccessDecision, DenyReason: Decision models
- UnknownUserError, RoleMismatchError: Raised by AccessPolicy.enforce
"""

from .policy import authorize, AccessPolicy
from .models import AccessDecision, DenyReason
from .exceptions import UnknownUserError, RoleMismatchError

__all__ = [
    "authorize",
    "AccessPolicy",
    "AccessDecision",
    "DenyReason",
    "UnknownUserError",
    "RoleMismatchError",
]
