"""
===============================================================================
CRC CARD — application/usecases/__init__.py
===============================================================================

Module:
    Exports de casos de uso, agrupados por área:
      - booking: workflow de reservas (alta, pago, asignación, estado)
      - promotion: solicitudes de promoción a decorador
      - users: upsert en login, roles, listados
      - catalog: publicaciones de servicios

Rules:
    - Solo re-exports; acá no hay lógica.
===============================================================================
"""

from .booking import (
    AssignDecoratorUseCase,
    CancelBookingUseCase,
    ConfirmPaymentUseCase,
    CreateBookingUseCase,
    CreateCheckoutSessionUseCase,
    FindAvailableDecoratorsUseCase,
    ListAssignedBookingsUseCase,
    ListCustomerBookingsUseCase,
    ListPendingBookingsUseCase,
    UpdateBookingStatusUseCase,
)
from .catalog import (
    CreateDecorationUseCase,
    DeleteDecorationUseCase,
    GetDecorationUseCase,
    ListDecorationsUseCase,
    UpdateDecorationUseCase,
)
from .promotion import (
    ApprovePromotionRequestUseCase,
    ListPromotionRequestsUseCase,
    RejectPromotionRequestUseCase,
    RequestPromotionUseCase,
)
from .users import (
    GetUserRoleUseCase,
    ListDecoratorsUseCase,
    ListUsersUseCase,
    UpdateUserRoleUseCase,
    UpsertUserUseCase,
)

__all__ = [
    # Booking
    "CreateBookingUseCase",
    "CreateCheckoutSessionUseCase",
    "ConfirmPaymentUseCase",
    "AssignDecoratorUseCase",
    "UpdateBookingStatusUseCase",
    "CancelBookingUseCase",
    "ListPendingBookingsUseCase",
    "ListCustomerBookingsUseCase",
    "ListAssignedBookingsUseCase",
    "FindAvailableDecoratorsUseCase",
    # Promotion
    "RequestPromotionUseCase",
    "ApprovePromotionRequestUseCase",
    "RejectPromotionRequestUseCase",
    "ListPromotionRequestsUseCase",
    # Users
    "UpsertUserUseCase",
    "GetUserRoleUseCase",
    "UpdateUserRoleUseCase",
    "ListUsersUseCase",
    "ListDecoratorsUseCase",
    # Catalog
    "CreateDecorationUseCase",
    "UpdateDecorationUseCase",
    "DeleteDecorationUseCase",
    "ListDecorationsUseCase",
    "GetDecorationUseCase",
]
