"""
Stripe payment gateway.

The API key is passed in at construction and sent per request, so the
stripe module's global api_key is never touched.
"""

import asyncio
import logging
from typing import Optional

import stripe

from shared.repository import run_blocking

from .interfaces import IPaymentGateway
from .models import PaymentIntent
from .exceptions import InvalidAmountError, PaymentFailedError, PaymentGatewayTimeoutError

logger = logging.getLogger(__name__)


class StripePaymentGateway(IPaymentGateway):
    """Creates card payment intents with Stripe."""

    def __init__(
        self,
        secret_key: str,
        currency: str = "usd",
        timeout: Optional[float] = None,
    ):
        self._secret_key = secret_key
        self._currency = currency
        self._timeout = timeout

    async def create_payment_intent(
        self,
        amount: int,
        currency: Optional[str] = None,
    ) -> PaymentIntent:
        """Create a card payment intent."""
        if amount <= 0:
            raise InvalidAmountError(amount, "Amount must be positive")
        if not self._secret_key:
            raise PaymentFailedError("Payment gateway not configured")

        currency = (currency or self._currency).lower()

        try:
            intent = await run_blocking(
                self._create_intent,
                amount,
                currency,
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            raise PaymentGatewayTimeoutError(self._timeout)
        except stripe.StripeError as e:
            logger.warning(f"Stripe rejected payment intent for {amount} {currency}: {e}")
            raise PaymentFailedError("Payment intent creation failed", stripe_error=str(e))

        return PaymentIntent(
            id=intent.id,
            client_secret=intent.client_secret,
            amount=intent.amount,
            currency=intent.currency,
        )

    def _create_intent(self, amount: int, currency: str) -> stripe.PaymentIntent:
        return stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            payment_method_types=["card"],
            api_key=self._secret_key,
        )
