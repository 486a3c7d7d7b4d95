"""
===============================================================================
TARJETA CRC — domain/booking_policy.py
===============================================================================

Módulo:
    Reglas de estado de reservas y disponibilidad de decoradores

Responsabilidades:
    - Definir los estados de reserva conocidos.
    - Decidir si un cambio de estado se acepta (tabla abierta: cualquier
      estado conocido puede pasar a cualquier otro estado conocido).
    - Decidir si un decorador está libre en una fecha de reserva.

Colaboradores:
    - application/usecases/booking: cambio de estado, consulta de disponibilidad.

Notas:
    - La disponibilidad compara solo la fecha de calendario; start_time/end_time
      se guardan en el decorador pero no se comparan.
===============================================================================
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from .entities import User

STATUS_PENDING = "pending"
STATUS_DECORATOR_ASSIGNED = "Decorator-assigned"
STATUS_IN_PROGRESS = "in-progress"
STATUS_COMPLETED = "completed"
STATUS_CANCELLED = "cancelled"

BOOKING_STATUSES: tuple[str, ...] = (
    STATUS_PENDING,
    STATUS_DECORATOR_ASSIGNED,
    STATUS_IN_PROGRESS,
    STATUS_COMPLETED,
    STATUS_CANCELLED,
)


def is_known_status(status: str | None) -> bool:
    return status in BOOKING_STATUSES


def can_transition(current: str | None, target: str) -> bool:
    """Cualquier estado conocido puede pasar a cualquier otro (incluido él mismo)."""
    return is_known_status(target)


def calendar_date(value: Any) -> Optional[date]:
    """
    Parte fecha de una working date guardada.

    Acepta datetime/date y strings ISO ("2024-05-01" o un timestamp
    completo). Devuelve None si el valor no se puede leer como fecha.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def is_available_on(decorator: User, booking_date: str) -> bool:
    """
    True si el decorador puede tomar una reserva en booking_date.

    Un decorador sin agenda registrada (working_date, start_time y end_time)
    siempre está disponible.
    """
    if not (decorator.working_date and decorator.start_time and decorator.end_time):
        return True
    requested = calendar_date(booking_date)
    if requested is None:
        return False
    return calendar_date(decorator.working_date) == requested
