"""
===============================================================================
USE CASE: Create Checkout Session
===============================================================================

Business Goal:
    Abrir una sesión de pago hosteada para reservar una decoración y devolver
    la URL de redirección al cliente.

Rules:
    - decorationId y el email del cliente son obligatorios; price >= 0 y
      quantity >= 1.
    - La intención de reserva (publicación, cliente, agenda, ubicación,
      teléfono) viaja como metadata opaca de la sesión y vuelve al confirmar.
    - Las fallas del proveedor se propagan como PaymentGatewayError (HTTP 500).
===============================================================================
"""

from __future__ import annotations

from ....domain.services import PaymentGateway
from ....domain.value_objects import CheckoutRequest
from .booking_results import BookingError, BookingErrorCode, CheckoutSessionResult


class CreateCheckoutSessionUseCase:
    def __init__(self, payment_gateway: PaymentGateway) -> None:
        self._payments = payment_gateway

    def execute(self, request: CheckoutRequest) -> CheckoutSessionResult:
        problem = self._validate(request)
        if problem:
            return CheckoutSessionResult(
                error=BookingError(
                    code=BookingErrorCode.VALIDATION_ERROR, message=problem
                )
            )

        url = self._payments.create_checkout_session(request)
        return CheckoutSessionResult(url=url)

    @staticmethod
    def _validate(request: CheckoutRequest) -> str | None:
        if not request.decoration_id.strip():
            return "decorationId is required"
        if not request.customer_email.strip():
            return "customer email is required"
        if request.price < 0:
            return "price must be non-negative"
        if request.quantity < 1:
            return "quantity must be at least 1"
        return None
