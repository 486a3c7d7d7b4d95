"""
===============================================================================
TARJETA CRC — interfaces/api/http/routers/__init__.py
===============================================================================

Name:
    Routers Package (HTTP)

Responsibilities:
    - Exponer un router por área para que lo incluya el router raíz.

Notes:
    - Acá no hay endpoints; solo re-exports.
===============================================================================
"""

from .bookings import router as bookings_router
from .decorations import router as decorations_router
from .decorators import router as decorators_router
from .payments import router as payments_router
from .promotions import router as promotions_router
from .users import router as users_router

__all__ = [
    "bookings_router",
    "decorations_router",
    "decorators_router",
    "payments_router",
    "promotions_router",
    "users_router",
]
