"""
Billing module data models.

These models define the data structures used by the billing module
and exposed to other modules through the interface.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PaymentIntent(BaseModel):
    """
    A charge intent created at the payment gateway.

    The client confirms the charge with client_secret; the backend never
    sees card details.
    """

    id: str = Field(..., description="Gateway payment intent ID")
    client_secret: str = Field(..., description="Opaque secret handed to the client")
    amount: int = Field(..., description="Amount in minor currency units")
    currency: str = Field(..., description="ISO currency code")


class PaymentIntentRequest(BaseModel):
    """Request to start a payment."""

    amount: int = Field(..., gt=0, description="Amount in minor currency units")
    currency: Optional[str] = Field(None, min_length=3, max_length=3)


class PaymentIntentResponse(BaseModel):
    """API response for a created payment intent."""

    client_secret: str = Field(..., description="Opaque secret handed to the client")
