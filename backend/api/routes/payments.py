"""
Payment endpoints.

POST /intent starts a charge at the payment gateway. POST / records the
completed payment and enrolls the caller through the enrollment
coordinator.

Completion returns 200 when every step succeeded and 207 when the payment
was recorded but a follow-up step did not; the body always lists every
step's outcome. A payment that could not be recorded is a 502 and nothing
else happened.
"""

from fastapi import APIRouter, Depends, Response, status

from shared.config import get_settings
from shared.models import Claims
from modules.billing.interfaces import IPaymentGateway
from modules.billing.models import PaymentIntentRequest, PaymentIntentResponse
from modules.enrollment.interfaces import IEnrollmentService
from modules.enrollment.models import (
    EnrollmentResponse,
    PaymentCompletionRequest,
    PaymentRecord,
)
from ..dependencies import get_enrollment_service, get_payment_gateway
from ..middleware.auth import get_current_claims

router = APIRouter()


@router.post("/intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    request: PaymentIntentRequest,
    claims: Claims = Depends(get_current_claims),
    gateway: IPaymentGateway = Depends(get_payment_gateway),
) -> PaymentIntentResponse:
    """Create a card payment intent and return its client secret."""
    intent = await gateway.create_payment_intent(request.amount, request.currency)
    return PaymentIntentResponse(client_secret=intent.client_secret)


@router.post("", response_model=EnrollmentResponse)
async def complete_payment(
    request: PaymentCompletionRequest,
    response: Response,
    claims: Claims = Depends(get_current_claims),
    service: IEnrollmentService = Depends(get_enrollment_service),
) -> EnrollmentResponse:
    """Record a completed payment and enroll the caller in the class."""
    payment = PaymentRecord(
        class_id=str(request.class_id),
        email=claims.email,
        amount=request.amount,
        currency=request.currency or get_settings().payment_currency,
        transaction_id=request.transaction_id,
    )
    result = await service.complete_enrollment(payment)

    if result.partial:
        response.status_code = status.HTTP_207_MULTI_STATUS

    return EnrollmentResponse(
        status="partial" if result.partial else "completed",
        incomplete_steps=result.incomplete_steps,
        result=result,
    )
