"""
===============================================================================
USE CASE: Confirm Payment (authoritative booking creation)
===============================================================================

Name:
    Confirm Payment Use Case

Business Goal:
    Convertir una sesión de checkout completa en exactamente una Booking. El
    cliente llama esto al llegar a la página de éxito, posiblemente más de una
    vez (recargas, reintentos), así que el comando tiene que ser idempotente.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ConfirmPaymentUseCase

Responsibilities:
    - Leer la sesión desde el gateway de pagos.
    - Resolver la publicación referida en la metadata de la sesión.
    - Insertar la reserva solo si la sesión está completa, la publicación
      existe y ninguna reserva tiene el payment intent de la sesión.
    - Tratar una colisión del índice único como "ya confirmada".

Collaborators:
    - PaymentGateway.retrieve_session
    - DecorationRepository.get
    - BookingRepository.find_by_transaction_id / insert

-------------------------------------------------------------------------------
BUSINESS RULES
-------------------------------------------------------------------------------
R1) Falta el session id -> NOT_FOUND.
R2) Session id desconocido -> NOT_FOUND.
R3) Insertar sii status == "complete" Y la publicación existe Y no hay reserva
    con transactionId == payment intent. Si no, responder sin escribir.
R4) Precio de la reserva = monto cobrado / 100 (lo que realmente se cobró).
===============================================================================
"""

from __future__ import annotations

import logging

from ....crosscutting.metrics import record_booking_created, record_payment_confirmation
from ....domain.booking_policy import STATUS_PENDING
from ....domain.entities import PAYMENT_STATUS_PAID, Booking, Decoration, utcnow
from ....domain.repositories import (
    BookingRepository,
    DecorationRepository,
    DuplicateTransactionError,
)
from ....domain.services import PaymentGateway
from ....domain.value_objects import CheckoutSession
from .booking_results import BookingError, BookingErrorCode, ConfirmPaymentResult

logger = logging.getLogger(__name__)

OUTCOME_CREATED = "created"
OUTCOME_ALREADY_CONFIRMED = "already_confirmed"
OUTCOME_INCOMPLETE = "incomplete"
OUTCOME_LISTING_MISSING = "listing_missing"


class ConfirmPaymentUseCase:
    def __init__(
        self,
        payment_gateway: PaymentGateway,
        decoration_repository: DecorationRepository,
        booking_repository: BookingRepository,
    ) -> None:
        self._payments = payment_gateway
        self._decorations = decoration_repository
        self._bookings = booking_repository

    def execute(self, session_id: str | None) -> ConfirmPaymentResult:
        if not session_id or not session_id.strip():
            return self._not_found("Session id not provided")

        session = self._payments.retrieve_session(session_id.strip())
        if session is None:
            return self._not_found("Checkout session not found", resource=session_id)

        transaction_id = session.payment_intent
        decoration_id = session.metadata.get("decorationId", "")
        decoration = self._decorations.get(decoration_id) if decoration_id else None
        existing = (
            self._bookings.find_by_transaction_id(transaction_id)
            if transaction_id
            else None
        )

        if existing is not None:
            return self._no_op(OUTCOME_ALREADY_CONFIRMED, transaction_id, existing.id)
        if not session.is_complete or not transaction_id:
            return self._no_op(OUTCOME_INCOMPLETE, transaction_id)
        if decoration is None:
            logger.warning(
                "Paid session references a missing listing",
                extra={"session_id": session.id, "decoration_id": decoration_id},
            )
            return self._no_op(OUTCOME_LISTING_MISSING, transaction_id)

        booking = self._build_booking(session, decoration, transaction_id)
        try:
            booking_id = self._bookings.insert(booking)
        except DuplicateTransactionError:
            # Una confirmación concurrente la insertó entre el lookup y el insert.
            winner = self._bookings.find_by_transaction_id(transaction_id)
            return self._no_op(
                OUTCOME_ALREADY_CONFIRMED,
                transaction_id,
                winner.id if winner else None,
            )

        record_booking_created("checkout")
        record_payment_confirmation(OUTCOME_CREATED)
        logger.info(
            "Booking created from checkout session",
            extra={"booking_id": booking_id, "session_id": session.id},
        )
        return ConfirmPaymentResult(
            created=True,
            booking_id=booking_id,
            transaction_id=transaction_id,
            outcome=OUTCOME_CREATED,
        )

    @staticmethod
    def _build_booking(
        session: CheckoutSession, decoration: Decoration, transaction_id: str
    ) -> Booking:
        meta = session.metadata
        return Booking(
            decoration_id=decoration.id or meta.get("decorationId", ""),
            decoration_name=decoration.name,
            category=decoration.category,
            transaction_id=transaction_id,
            customer_email=meta.get("customer") or session.customer_email or "",
            customer_name=meta.get("customerName"),
            status=STATUS_PENDING,
            payment_status=PAYMENT_STATUS_PAID,
            price=session.amount_major,
            assigned_decorator=None,
            booking_date=meta.get("bookingDate", ""),
            start_time=meta.get("startTime", ""),
            end_time=meta.get("endTime", ""),
            division=meta.get("division"),
            district=meta.get("district"),
            phone=meta.get("phone"),
            created_at=utcnow(),
        )

    @staticmethod
    def _no_op(
        outcome: str, transaction_id: str | None, booking_id: str | None = None
    ) -> ConfirmPaymentResult:
        record_payment_confirmation(outcome)
        return ConfirmPaymentResult(
            created=False,
            booking_id=booking_id,
            transaction_id=transaction_id,
            outcome=outcome,
        )

    @staticmethod
    def _not_found(message: str, resource: str | None = None) -> ConfirmPaymentResult:
        return ConfirmPaymentResult(
            error=BookingError(
                code=BookingErrorCode.NOT_FOUND, message=message, resource=resource
            )
        )
