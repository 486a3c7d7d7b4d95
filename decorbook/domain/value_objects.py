"""
===============================================================================
CRC CARD — domain/value_objects.py
===============================================================================

Module:
    Value objects exchanged with external services

Responsibilities:
    - Principal: the verified identity behind a bearer token.
    - CheckoutRequest: what the payment gateway needs to open a session.
    - CheckoutSession: what the gateway reports back about a session.

Collaborators:
    - domain.services (ports)
    - infrastructure/services (adapters)
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

SESSION_STATUS_COMPLETE = "complete"


@dataclass(frozen=True)
class Principal:
    """Verified caller. Email is the key used against the user store."""

    email: str
    uid: Optional[str] = None


@dataclass(frozen=True)
class CheckoutRequest:
    """
    Booking intent handed to the payment gateway.

    price is a major-unit decimal amount; adapters convert to minor units.
    """

    decoration_id: str
    name: str
    price: float
    customer_email: str
    quantity: int = 1
    description: Optional[str] = None
    image: Optional[str] = None
    customer_name: Optional[str] = None
    booking_date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    division: Optional[str] = None
    district: Optional[str] = None
    phone: Optional[str] = None

    @property
    def unit_amount_minor(self) -> int:
        return int(round(self.price * 100))

    def metadata(self) -> Dict[str, str]:
        """Opaque string metadata attached to the session."""
        raw = {
            "decorationId": self.decoration_id,
            "customer": self.customer_email,
            "customerName": self.customer_name,
            "bookingDate": self.booking_date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "division": self.division,
            "district": self.district,
            "phone": self.phone,
        }
        return {k: str(v) for k, v in raw.items() if v is not None}


@dataclass(frozen=True)
class CheckoutSession:
    """Outcome of a checkout session as reported by the gateway."""

    id: str
    status: Optional[str]
    payment_intent: Optional[str]
    amount_total: Optional[int]
    customer_email: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        return self.status == SESSION_STATUS_COMPLETE

    @property
    def amount_major(self) -> Optional[float]:
        if self.amount_total is None:
            return None
        return self.amount_total / 100
