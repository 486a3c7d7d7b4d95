"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (User, Decoration, Booking, PromotionRequest)

Responsabilidades:
    - Definir estructuras centrales del negocio (sin infraestructura).
    - Brindar helpers mínimos para mantener invariantes simples en un lugar.
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.repositories: persisten/recuperan estas entidades.
    - application/usecases: las construyen y consumen.
    - interfaces/api: las serializan vía schemas.

Principios:
    - Sin imports de MongoDB/FastAPI.
    - Los ids son strings opacos (el store decide el formato).
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utcnow() -> datetime:
    """now en UTC con timezone (único reloj para todas las entidades)."""
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Roles / estados
# ---------------------------------------------------------------------------

ROLE_GUEST = "guest"
ROLE_DECORATOR = "decorator"
ROLE_ADMIN = "admin"
KNOWN_ROLES = frozenset({ROLE_GUEST, ROLE_DECORATOR, ROLE_ADMIN})

WORK_STATUS_AVAILABLE = "available"
WORK_STATUS_BUSY = "busy"

PAYMENT_STATUS_PAID = "paid"

REQUEST_STATUS_PENDING = "pending"
REQUEST_STATUS_APPROVED = "approved"
REQUEST_STATUS_REJECTED = "rejected"
ACTIVE_REQUEST_STATUSES = frozenset({REQUEST_STATUS_PENDING, REQUEST_STATUS_APPROVED})


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


@dataclass
class User:
    """
    Usuario del marketplace, identificado por email.

    work_status solo tiene sentido con role == "decorator"; el store elimina
    el campo para cualquier otro rol.
    """

    email: str
    name: Optional[str] = None
    id: Optional[str] = None
    photo: Optional[str] = None
    role: Optional[str] = None
    work_status: Optional[str] = None
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    last_logged_in: Optional[datetime] = None

    # Agenda del decorador (un solo día de trabajo)
    working_date: Optional[Any] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @property
    def is_decorator(self) -> bool:
        return self.role == ROLE_DECORATOR


# ---------------------------------------------------------------------------
# Decoration (publicación de servicio)
# ---------------------------------------------------------------------------


DECORATION_MUTABLE_FIELDS = ("name", "category", "description", "price", "image")


@dataclass
class Decoration:
    """Servicio publicado en el marketplace."""

    name: str
    category: str
    description: str
    price: float
    id: Optional[str] = None
    image: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ---------------------------------------------------------------------------
# Booking
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AssignedDecorator:
    """
    Snapshot del decorador tomado al momento de la asignación.

    Ediciones posteriores del perfil no se propagan a reservas pasadas.
    """

    id: str
    name: Optional[str]
    email: str
    phone: Optional[str]

    @classmethod
    def from_user(cls, user: User) -> "AssignedDecorator":
        return cls(
            id=user.id or "", name=user.name, email=user.email, phone=user.phone
        )


@dataclass
class Booking:
    """
    Reserva paga de una decoración para una fecha y franja horaria.

    Las reservas nunca se borran; cancelar es un cambio de estado.
    """

    decoration_id: str
    customer_email: str
    booking_date: str
    start_time: str
    end_time: str
    status: str
    id: Optional[str] = None
    customer_name: Optional[str] = None
    decoration_name: Optional[str] = None
    category: Optional[str] = None
    transaction_id: Optional[str] = None
    payment_status: Optional[str] = None
    price: Optional[float] = None
    assigned_decorator: Optional[AssignedDecorator] = None
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    booked_at: Optional[datetime] = None
    assigned_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Solicitud de promoción
# ---------------------------------------------------------------------------


@dataclass
class PromotionRequest:
    """Postulación de un usuario para ser decorador."""

    name: str
    email: str
    division: str
    district: str
    phone: str
    role: str = ROLE_DECORATOR
    status: str = REQUEST_STATUS_PENDING
    id: Optional[str] = None
    requested_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        """Una solicitud pending o approved bloquea otra nueva para el mismo email."""
        return self.status in ACTIVE_REQUEST_STATUSES
