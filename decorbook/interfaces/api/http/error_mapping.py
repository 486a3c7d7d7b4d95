"""
===============================================================================
TARJETA CRC — error_mapping.py (UseCase Error -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir códigos de error de casos de uso a HTTP Exceptions RFC7807.
  - Centralizar el mapeo para que los routers queden finos.
  - Mantener el dominio libre de HTTP.

Reglas:
  - Los use cases devuelven errores tipados (code + message [+ resource]).
  - Las excepciones de infraestructura no pasan por acá; las manejan los
    exception handlers registrados en api/exception_handlers.py.

Colaboradores:
  - application.usecases.* (BookingErrorCode, PromotionErrorCode, ...)
  - crosscutting.error_responses
===============================================================================
"""

from __future__ import annotations

from typing import NoReturn

from ....application.usecases.booking import BookingError, BookingErrorCode
from ....application.usecases.catalog import DecorationError, DecorationErrorCode
from ....application.usecases.promotion import PromotionError, PromotionErrorCode
from ....application.usecases.users import UserError, UserErrorCode
from ....crosscutting.error_responses import (
    conflict,
    internal_error,
    not_found,
    validation_error,
)


def raise_booking_error(error: BookingError) -> NoReturn:
    """Traduce BookingError -> HTTP."""
    if error.code == BookingErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == BookingErrorCode.NOT_FOUND:
        raise not_found(error.message)
    if error.code == BookingErrorCode.CONFLICT:
        raise conflict(error.message)
    raise internal_error(error.message)


def raise_promotion_error(error: PromotionError) -> NoReturn:
    """Traduce PromotionError -> HTTP."""
    if error.code == PromotionErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == PromotionErrorCode.NOT_FOUND:
        raise not_found(error.message)
    if error.code == PromotionErrorCode.CONFLICT:
        raise conflict(error.message)
    raise internal_error(error.message)


def raise_user_error(error: UserError) -> NoReturn:
    if error.code == UserErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == UserErrorCode.NOT_FOUND:
        raise not_found(error.message)
    raise internal_error(error.message)


def raise_decoration_error(error: DecorationError) -> NoReturn:
    if error.code == DecorationErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == DecorationErrorCode.NOT_FOUND:
        raise not_found(error.message)
    raise internal_error(error.message)
