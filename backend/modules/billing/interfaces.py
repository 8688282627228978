"""
Billing module interface.

Other modules should depend on IPaymentGateway, not the Stripe implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import PaymentIntent


@runtime_checkable
class IPaymentGateway(Protocol):
    """Interface for creating charges at an external payment provider."""

    async def create_payment_intent(
        self,
        amount: int,
        currency: Optional[str] = None,
    ) -> PaymentIntent:
        """
        Create a charge intent.

        Args:
            amount: Amount in minor currency units (must be positive)
            currency: ISO currency code, defaults to the configured currency

        Returns:
            PaymentIntent with the client secret

        Raises:
            InvalidAmountError: If amount is not positive
            PaymentFailedError: If the provider fails the request
        """
        ...
