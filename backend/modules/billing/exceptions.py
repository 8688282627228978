"""
Billing module exceptions.

These exceptions are raised by the billing module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, ValidationError


class InvalidAmountError(ValidationError):
    """Raised when a charge amount is invalid."""

    def __init__(self, amount: int, reason: str):
        super().__init__(
            f"Invalid amount: {amount}. {reason}",
            code="INVALID_AMOUNT",
            details={"amount": amount, "reason": reason},
        )


class PaymentFailedError(ExternalServiceError):
    """Raised when the payment gateway rejects or fails a request."""

    def __init__(
        self,
        message: str,
        stripe_error: Optional[str] = None,
        code: str = "PAYMENT_FAILED",
    ):
        super().__init__(
            message,
            service="stripe",
            code=code,
            details={"stripe_error": stripe_error} if stripe_error else {},
        )


class PaymentGatewayTimeoutError(PaymentFailedError):
    """Raised when the payment gateway does not answer within the timeout."""

    status_code = 504

    def __init__(self, timeout: Optional[float]):
        super().__init__(
            f"Payment gateway did not respond within {timeout}s",
            code="PAYMENT_GATEWAY_TIMEOUT",
        )
        self.details["timeout"] = timeout
