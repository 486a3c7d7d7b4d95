"""
===============================================================================
TARJETA CRC — schemas/bookings.py
===============================================================================

Module:
    Schemas HTTP del workflow de reservas

Responsibilities:
    - Body de reserva previa al pago (/userBooks) con `userInfo` anidado.
    - Bodies de checkout (`paymentInfo`) y confirmación (`sessionId`).
    - Comandos de admin/decorador: asignar, cambiar estado.
    - Respuesta de reserva con nombres camelCase y `assignedDecorator: null`
      explícito hasta que se asigna un decorador.

Collaborators:
    - application.usecases.booking.CreateBookingInput
    - domain.value_objects.CheckoutRequest
    - domain.entities.Booking
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .....application.usecases.booking import CreateBookingInput
from .....domain.entities import AssignedDecorator, Booking
from .....domain.value_objects import CheckoutRequest

_CAMEL = ConfigDict(populate_by_name=True)


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class UserInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_email: Optional[str] = Field(default=None, alias="userEmail")
    user_name: Optional[str] = Field(default=None, alias="userName")


class CreateBookingReq(BaseModel):
    """
    Body de reserva previa al pago. Los campos obligatorios los valida el use
    case, así el 400 nombra todos los campos faltantes juntos. Las claves
    desconocidas se guardan en la reserva, salvo las que pisan un campo.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    decoration_id: Optional[str] = Field(default=None, alias="decorationId")
    decoration_name: Optional[str] = Field(default=None, alias="decorationName")
    category: Optional[str] = None
    booking_date: Optional[str] = Field(default=None, alias="bookingDate")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")
    price: Optional[float] = None
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    user_info: Optional[UserInfo] = Field(default=None, alias="userInfo")

    def to_input(self) -> CreateBookingInput:
        info = self.user_info or UserInfo()
        return CreateBookingInput(
            decoration_id=self.decoration_id or "",
            booking_date=self.booking_date or "",
            start_time=self.start_time or "",
            end_time=self.end_time or "",
            customer_email=info.user_email or "",
            customer_name=info.user_name,
            decoration_name=self.decoration_name,
            category=self.category,
            price=self.price,
            division=self.division,
            district=self.district,
            phone=self.phone,
            extra=BookingRes._passthrough(self.model_extra or {}),
        )


class CustomerInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    name: Optional[str] = None


class CheckoutSessionReq(BaseModel):
    """paymentInfo que envía el modal de reserva."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    decoration_id: str = Field(default="", alias="decorationId")
    name: str = ""
    description: Optional[str] = None
    image: Optional[str] = None
    price: float = 0
    quantity: int = 1
    customer: CustomerInfo = Field(default_factory=CustomerInfo)
    booking_date: Optional[str] = Field(default=None, alias="bookingDate")
    start_time: Optional[str] = Field(default=None, alias="startTime")
    end_time: Optional[str] = Field(default=None, alias="endTime")
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None

    def to_request(self) -> CheckoutRequest:
        return CheckoutRequest(
            decoration_id=self.decoration_id,
            name=self.name,
            price=self.price,
            customer_email=self.customer.email or "",
            customer_name=self.customer.name,
            quantity=self.quantity,
            description=self.description,
            image=self.image,
            booking_date=self.booking_date,
            start_time=self.start_time,
            end_time=self.end_time,
            division=self.division,
            district=self.district,
            phone=self.phone,
        )


class PaymentSuccessReq(BaseModel):
    model_config = _CAMEL

    session_id: Optional[str] = Field(default=None, alias="sessionId")


class AssignDecoratorReq(BaseModel):
    model_config = _CAMEL

    booking_id: str = Field(default="", alias="bookingId")
    decorator_id: str = Field(default="", alias="decoratorId")


class UpdateStatusReq(BaseModel):
    status: Optional[str] = None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class AssignedDecoratorRes(BaseModel):
    id: str
    name: Optional[str] = None
    email: str
    phone: Optional[str] = None

    @classmethod
    def from_snapshot(cls, snapshot: AssignedDecorator) -> "AssignedDecoratorRes":
        return cls(
            id=snapshot.id,
            name=snapshot.name,
            email=snapshot.email,
            phone=snapshot.phone,
        )


class BookingRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[str] = Field(default=None, alias="_id")
    decoration_id: str = Field(alias="decorationId")
    decoration_name: Optional[str] = Field(default=None, alias="decorationName")
    category: Optional[str] = None
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
    customer: str
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    status: str
    payment_status: Optional[str] = None
    price: Optional[float] = None
    assigned_decorator: Optional[AssignedDecoratorRes] = Field(
        default=None, alias="assignedDecorator"
    )
    booking_date: str = Field(alias="bookingDate")
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    booked_at: Optional[datetime] = Field(default=None, alias="bookedAt")
    assigned_at: Optional[datetime] = Field(default=None, alias="assignedAt")
    cancelled_at: Optional[datetime] = Field(default=None, alias="cancelledAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingRes":
        snapshot = booking.assigned_decorator
        return cls(
            id=booking.id,
            decoration_id=booking.decoration_id,
            decoration_name=booking.decoration_name,
            category=booking.category,
            transaction_id=booking.transaction_id,
            customer=booking.customer_email,
            customer_name=booking.customer_name,
            status=booking.status,
            payment_status=booking.payment_status,
            price=booking.price,
            assigned_decorator=(
                AssignedDecoratorRes.from_snapshot(snapshot) if snapshot else None
            ),
            booking_date=booking.booking_date,
            start_time=booking.start_time,
            end_time=booking.end_time,
            division=booking.division,
            district=booking.district,
            phone=booking.phone,
            created_at=booking.created_at,
            booked_at=booking.booked_at,
            assigned_at=booking.assigned_at,
            cancelled_at=booking.cancelled_at,
            updated_at=booking.updated_at,
            **cls._passthrough(booking.extra),
        )

    @classmethod
    def _passthrough(cls, extra: dict) -> dict:
        """Claves extra, sin las que pisan un campo declarado o parecen operadores."""
        taken = set(cls.model_fields)
        taken.update(f.alias for f in cls.model_fields.values() if f.alias)
        return {
            k: v
            for k, v in extra.items()
            if k not in taken and not k.startswith(("$", "_")) and "." not in k
        }


class CreateBookingRes(BaseModel):
    model_config = _CAMEL

    success: bool = True
    message: str = "Booking successful"
    inserted_id: str = Field(alias="insertedId")


class CheckoutSessionRes(BaseModel):
    url: str


class PaymentSuccessRes(BaseModel):
    model_config = _CAMEL

    success: bool = True
    created: bool
    outcome: Optional[str] = None
    booking_id: Optional[str] = Field(default=None, alias="bookingId")
    transaction_id: Optional[str] = Field(default=None, alias="transactionId")
