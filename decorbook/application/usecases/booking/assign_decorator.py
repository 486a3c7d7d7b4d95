"""
===============================================================================
USE CASE: Assign Decorator (two-step workflow)
===============================================================================

Name:
    Assign Decorator Use Case

Business Goal:
    Asignar un decorador a una reserva (acción de admin) y marcar al
    decorador como ocupado.

-------------------------------------------------------------------------------
BUSINESS RULES
-------------------------------------------------------------------------------
R1) Decorador inexistente -> NOT_FOUND, la reserva no se toca.
R2) Reserva inexistente -> NOT_FOUND.
R3) La reserva guarda un snapshot {id, name, email, phone} del decorador
    tomado ahora; ediciones posteriores del perfil no cambian asignaciones
    pasadas.
R4) status -> "Decorator-assigned", assignedAt = now.

-------------------------------------------------------------------------------
FLOW
-------------------------------------------------------------------------------
1) Cargar decorador y luego reserva (guard clauses).
2) Escritura primaria: snapshot + status en la reserva.
3) Follow-up: work_Status = "busy" en el usuario, con retry ante errores
   transitorios. Si sigue fallando el error se propaga (HTTP 500); la reserva
   queda asignada y repetir el comando vuelve a aplicar ambas escrituras.
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from ....domain.booking_policy import STATUS_DECORATOR_ASSIGNED
from ....domain.entities import WORK_STATUS_BUSY, AssignedDecorator, utcnow
from ....domain.repositories import BookingRepository, UserRepository
from ..workflow import RetryPolicy, run_followup
from .booking_results import BookingError, BookingErrorCode, BookingResult

FOLLOWUP_STEP = "assign_decorator.work_status"


class AssignDecoratorUseCase:
    def __init__(
        self,
        booking_repository: BookingRepository,
        user_repository: UserRepository,
        *,
        followup_retry: Optional[RetryPolicy] = None,
    ) -> None:
        self._bookings = booking_repository
        self._users = user_repository
        self._retry = followup_retry

    def execute(self, booking_id: str, decorator_id: str) -> BookingResult:
        if not booking_id or not decorator_id:
            return BookingResult(
                error=BookingError(
                    code=BookingErrorCode.VALIDATION_ERROR,
                    message="bookingId and decoratorId are required",
                )
            )

        decorator = self._users.get_by_id(decorator_id)
        if decorator is None:
            return self._not_found("Decorator not found", decorator_id)

        booking = self._bookings.get(booking_id)
        if booking is None:
            return self._not_found("Booking not found", booking_id)

        now = utcnow()
        snapshot = AssignedDecorator.from_user(decorator)
        if not self._bookings.assign_decorator(
            booking_id, snapshot, status=STATUS_DECORATOR_ASSIGNED, at=now
        ):
            # La reserva desapareció entre la lectura y la escritura.
            return self._not_found("Booking not found", booking_id)

        run_followup(
            FOLLOWUP_STEP,
            lambda: self._users.set_work_status(decorator_id, WORK_STATUS_BUSY, now),
            retry=self._retry,
            context={"booking_id": booking_id, "decorator_id": decorator_id},
        )

        return BookingResult(booking=self._bookings.get(booking_id))

    @staticmethod
    def _not_found(message: str, resource: str) -> BookingResult:
        return BookingResult(
            error=BookingError(
                code=BookingErrorCode.NOT_FOUND, message=message, resource=resource
            )
        )
