"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/bookings.py
===============================================================================

Name:
    Bookings Router

Responsibilities:
    - Alta de reserva previa al pago (POST /userBooks).
    - Cola del admin (GET /bookings) y asignación de decorador.
    - Cambios de estado y cancelación por transaction id.
    - Historial del cliente (GET /my-bookins) y tareas del decorador
      (GET /assigned-task, GET /manage-booking).
    - Traducir BookingError -> RFC7807.

Collaborators:
    - application.usecases.booking
    - identity.auth (require_principal, require_admin)
    - container (factories de DI)
    - schemas.bookings
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from .....application.usecases import (
    AssignDecoratorUseCase,
    CancelBookingUseCase,
    CreateBookingUseCase,
    ListAssignedBookingsUseCase,
    ListCustomerBookingsUseCase,
    ListPendingBookingsUseCase,
    UpdateBookingStatusUseCase,
)
from .....container import (
    get_assign_decorator_use_case,
    get_cancel_booking_use_case,
    get_create_booking_use_case,
    get_list_assigned_bookings_use_case,
    get_list_customer_bookings_use_case,
    get_list_pending_bookings_use_case,
    get_update_booking_status_use_case,
)
from .....domain.value_objects import Principal
from .....identity.auth import require_admin, require_principal
from ..error_mapping import raise_booking_error
from ..schemas.bookings import (
    AssignDecoratorReq,
    BookingRes,
    CreateBookingReq,
    CreateBookingRes,
    UpdateStatusReq,
)

router = APIRouter(tags=["bookings"])


def _to_list(result) -> list[BookingRes]:
    if result.error is not None:
        raise_booking_error(result.error)
    return [BookingRes.from_entity(b) for b in result.bookings]


# =============================================================================
# Commands
# =============================================================================


@router.post("/userBooks", response_model=CreateBookingRes)
def create_booking(
    req: CreateBookingReq,
    use_case: CreateBookingUseCase = Depends(get_create_booking_use_case),
):
    result = use_case.execute(req.to_input())
    if result.error is not None:
        raise_booking_error(result.error)
    return CreateBookingRes(inserted_id=result.booking_id)


@router.patch("/bookings/assign-decorator", response_model=BookingRes)
def assign_decorator(
    req: AssignDecoratorReq,
    _admin: Principal = Depends(require_admin()),
    use_case: AssignDecoratorUseCase = Depends(get_assign_decorator_use_case),
):
    result = use_case.execute(req.booking_id, req.decorator_id)
    if result.error is not None:
        raise_booking_error(result.error)
    return BookingRes.from_entity(result.booking)


@router.patch("/bookings/cancel/{transaction_id}", response_model=BookingRes)
def cancel_booking(
    transaction_id: str,
    _principal: Principal = Depends(require_principal()),
    use_case: CancelBookingUseCase = Depends(get_cancel_booking_use_case),
):
    result = use_case.execute(transaction_id)
    if result.error is not None:
        raise_booking_error(result.error)
    return BookingRes.from_entity(result.booking)


@router.patch("/bookings/{booking_id}/status", response_model=BookingRes)
def update_booking_status(
    booking_id: str,
    req: UpdateStatusReq,
    _principal: Principal = Depends(require_principal()),
    use_case: UpdateBookingStatusUseCase = Depends(
        get_update_booking_status_use_case
    ),
):
    result = use_case.execute(booking_id, req.status)
    if result.error is not None:
        raise_booking_error(result.error)
    return BookingRes.from_entity(result.booking)


# =============================================================================
# Queries
# =============================================================================


@router.get("/bookings", response_model=list[BookingRes])
def list_pending_bookings(
    _admin: Principal = Depends(require_admin()),
    use_case: ListPendingBookingsUseCase = Depends(
        get_list_pending_bookings_use_case
    ),
):
    return _to_list(use_case.execute())


@router.get("/my-bookins", response_model=list[BookingRes])
def list_my_bookings(
    principal: Principal = Depends(require_principal()),
    use_case: ListCustomerBookingsUseCase = Depends(
        get_list_customer_bookings_use_case
    ),
):
    return _to_list(use_case.execute(principal.email))


@router.get("/assigned-task", response_model=list[BookingRes])
def list_assigned_tasks(
    email: str | None = Query(None),
    status: str | None = Query(None),
    _principal: Principal = Depends(require_principal()),
    use_case: ListAssignedBookingsUseCase = Depends(
        get_list_assigned_bookings_use_case
    ),
):
    return _to_list(use_case.execute(email, status=status))


@router.get("/manage-booking", response_model=list[BookingRes])
def list_caller_assignments(
    status: str | None = Query(None),
    principal: Principal = Depends(require_principal()),
    use_case: ListAssignedBookingsUseCase = Depends(
        get_list_assigned_bookings_use_case
    ),
):
    return _to_list(use_case.execute(principal.email, status=status))
