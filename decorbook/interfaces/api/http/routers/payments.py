"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/payments.py
===============================================================================

Name:
    Payments Router (checkout hosteado)

Responsibilities:
    - POST /create-checkout-session: abrir una sesión de checkout y devolver
      su URL.
    - POST /payment-success: confirmar una sesión y crear la reserva
      (idempotente; llamadas repetidas para una sesión crean una reserva).

Collaborators:
    - CreateCheckoutSessionUseCase, ConfirmPaymentUseCase
    - container (factories de DI)
    - schemas.bookings

Notes:
    - Las fallas del gateway salen como PaymentGatewayError y las renderiza el
      exception handler registrado (500 GATEWAY_ERROR).
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from .....application.usecases import (
    ConfirmPaymentUseCase,
    CreateCheckoutSessionUseCase,
)
from .....container import (
    get_confirm_payment_use_case,
    get_create_checkout_session_use_case,
)
from ..error_mapping import raise_booking_error
from ..schemas.bookings import (
    CheckoutSessionReq,
    CheckoutSessionRes,
    PaymentSuccessReq,
    PaymentSuccessRes,
)

router = APIRouter(tags=["payments"])


@router.post("/create-checkout-session", response_model=CheckoutSessionRes)
def create_checkout_session(
    req: CheckoutSessionReq,
    use_case: CreateCheckoutSessionUseCase = Depends(
        get_create_checkout_session_use_case
    ),
):
    result = use_case.execute(req.to_request())
    if result.error is not None:
        raise_booking_error(result.error)
    return CheckoutSessionRes(url=result.url)


@router.post("/payment-success", response_model=PaymentSuccessRes)
def payment_success(
    req: PaymentSuccessReq,
    use_case: ConfirmPaymentUseCase = Depends(get_confirm_payment_use_case),
):
    result = use_case.execute(req.session_id)
    if result.error is not None:
        raise_booking_error(result.error)
    return PaymentSuccessRes(
        created=result.created,
        outcome=result.outcome,
        booking_id=result.booking_id,
        transaction_id=result.transaction_id,
    )
