"""
Billing module.

Handles the Stripe integration used to start payments.

Public API:
- IPaymentGateway: Interface for creating charges
- PaymentIntent: A created charge intent
- Billing exceptions: InvalidAmountError, PaymentFailedError, PaymentGatewayTimeoutError
"""

from .interfaces import IPaymentGateway
from .models import PaymentIntent, PaymentIntentRequest, PaymentIntentResponse
from .exceptions import InvalidAmountError, PaymentFailedError, PaymentGatewayTimeoutError

__all__ = [
    # Interface
    "IPaymentGateway",
    # Models
    "PaymentIntent",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    # Exceptions
    "InvalidAmountError",
    "PaymentFailedError",
    "PaymentGatewayTimeoutError",
]
