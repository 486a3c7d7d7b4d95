"""
===============================================================================
TARJETA CRC — interfaces/api/http/schemas/__init__.py
===============================================================================

Module:
    DTOs HTTP (pydantic), un módulo por área:
      - users: upsert en login, roles, listados de usuarios
      - decorations: publicaciones de servicios
      - bookings: workflow de reservas y pagos
      - promotions: solicitudes de promoción a decorador

Notes:
    - Los nombres de wire siguen a los documentos guardados (camelCase donde
      el cliente ya lo usa); los atributos Python quedan en snake_case.
===============================================================================
"""

from .bookings import (
    AssignDecoratorReq,
    BookingRes,
    CheckoutSessionReq,
    CheckoutSessionRes,
    CreateBookingReq,
    CreateBookingRes,
    PaymentSuccessReq,
    PaymentSuccessRes,
    UpdateStatusReq,
)
from .decorations import (
    CreateDecorationReq,
    DecorationRes,
    DeleteDecorationRes,
    UpdateDecorationReq,
)
from .promotions import PromotionRequestReq, PromotionRequestRes
from .users import (
    AvailableDecoratorsRes,
    UpdateRoleReq,
    UpsertUserRes,
    UserLoginReq,
    UserRes,
    UserRoleRes,
)

__all__ = [
    "AssignDecoratorReq",
    "BookingRes",
    "CheckoutSessionReq",
    "CheckoutSessionRes",
    "CreateBookingReq",
    "CreateBookingRes",
    "PaymentSuccessReq",
    "PaymentSuccessRes",
    "UpdateStatusReq",
    "CreateDecorationReq",
    "DecorationRes",
    "DeleteDecorationRes",
    "UpdateDecorationReq",
    "PromotionRequestReq",
    "PromotionRequestRes",
    "AvailableDecoratorsRes",
    "UpdateRoleReq",
    "UpsertUserRes",
    "UserLoginReq",
    "UserRes",
    "UserRoleRes",
]
