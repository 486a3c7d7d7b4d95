"""
Casos de uso del workflow de reservas: alta, checkout, confirmación de pago,
asignación, cambios de estado, cancelación, listados y disponibilidad.
"""

from .assign_decorator import AssignDecoratorUseCase
from .booking_results import (
    AvailabilityResult,
    BookingError,
    BookingErrorCode,
    BookingListResult,
    BookingResult,
    CheckoutSessionResult,
    ConfirmPaymentResult,
    CreateBookingResult,
)
from .cancel_booking import CancelBookingUseCase
from .confirm_payment import ConfirmPaymentUseCase
from .create_booking import CreateBookingInput, CreateBookingUseCase
from .create_checkout_session import CreateCheckoutSessionUseCase
from .find_available_decorators import FindAvailableDecoratorsUseCase
from .list_bookings import (
    ListAssignedBookingsUseCase,
    ListCustomerBookingsUseCase,
    ListPendingBookingsUseCase,
)
from .update_booking_status import UpdateBookingStatusUseCase

__all__ = [
    # Resultados
    "BookingError",
    "BookingErrorCode",
    "BookingResult",
    "BookingListResult",
    "CreateBookingResult",
    "CheckoutSessionResult",
    "ConfirmPaymentResult",
    "AvailabilityResult",
    # Comandos
    "CreateBookingInput",
    "CreateBookingUseCase",
    "CreateCheckoutSessionUseCase",
    "ConfirmPaymentUseCase",
    "AssignDecoratorUseCase",
    "UpdateBookingStatusUseCase",
    "CancelBookingUseCase",
    # Consultas
    "ListPendingBookingsUseCase",
    "ListCustomerBookingsUseCase",
    "ListAssignedBookingsUseCase",
    "FindAvailableDecoratorsUseCase",
]
