"""
Name: Stripe Checkout Payment Gateway

Responsibilities:
  - Abrir sesiones de Checkout hosteado con un único ítem (la decoración)
  - Leer una sesión (status, payment intent, monto cobrado, metadata)
  - Traducir stripe.StripeError a PaymentGatewayError

Collaborators:
  - stripe (Checkout Session API)
  - domain.value_objects.CheckoutRequest / CheckoutSession

Notes:
  - success_url lleva "?session_id={CHECKOUT_SESSION_ID}" para que el frontend
    llame a /payment-success con el id que Stripe reemplaza.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import stripe

from ...crosscutting.exceptions import PaymentGatewayError
from ...crosscutting.logger import logger
from ...domain.value_objects import CheckoutRequest, CheckoutSession


def _with_session_placeholder(url: str) -> str:
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}session_id={{CHECKOUT_SESSION_ID}}"


def _payment_intent_id(raw: Any) -> Optional[str]:
    # Las sesiones expandidas devuelven el objeto PaymentIntent en vez del id.
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    return getattr(raw, "id", None) or str(raw)


class StripePaymentGateway:
    """PaymentGateway adapter over stripe.checkout.Session."""

    def __init__(
        self,
        *,
        api_key: str,
        success_url: str,
        cancel_url: str,
        currency: str = "usd",
    ) -> None:
        self._api_key = api_key
        self._success_url = _with_session_placeholder(success_url)
        self._cancel_url = cancel_url
        self._currency = currency

    def create_checkout_session(self, request: CheckoutRequest) -> str:
        product_data: Dict[str, Any] = {"name": request.name[:100]}
        if request.description:
            product_data["description"] = request.description
        if request.image:
            product_data["images"] = [request.image]

        try:
            session = stripe.checkout.Session.create(
                api_key=self._api_key,
                line_items=[
                    {
                        "price_data": {
                            "currency": self._currency,
                            "product_data": product_data,
                            "unit_amount": request.unit_amount_minor,
                        },
                        "quantity": request.quantity,
                    }
                ],
                customer_email=request.customer_email,
                mode="payment",
                metadata=request.metadata(),
                success_url=self._success_url,
                cancel_url=self._cancel_url,
            )
        except stripe.StripeError as exc:
            logger.error(
                "Stripe checkout session creation failed",
                extra={
                    "decoration_id": request.decoration_id,
                    "error_type": type(exc).__name__,
                },
            )
            raise PaymentGatewayError(
                "Checkout session creation failed", original_error=exc
            ) from exc

        return session.url

    def retrieve_session(self, session_id: str) -> Optional[CheckoutSession]:
        try:
            session = stripe.checkout.Session.retrieve(
                session_id, api_key=self._api_key
            )
        except stripe.InvalidRequestError as exc:
            # Un session id desconocido vuelve como 404 invalid_request_error.
            if getattr(exc, "http_status", None) == 404:
                return None
            raise PaymentGatewayError(
                "Checkout session lookup failed", original_error=exc
            ) from exc
        except stripe.StripeError as exc:
            logger.error(
                "Stripe checkout session lookup failed",
                extra={"error_type": type(exc).__name__},
            )
            raise PaymentGatewayError(
                "Checkout session lookup failed", original_error=exc
            ) from exc

        metadata = session.metadata.to_dict() if session.metadata else {}
        return CheckoutSession(
            id=session.id,
            status=session.status,
            payment_intent=_payment_intent_id(session.payment_intent),
            amount_total=session.amount_total,
            customer_email=session.customer_email,
            metadata={str(k): str(v) for k, v in metadata.items()},
        )
