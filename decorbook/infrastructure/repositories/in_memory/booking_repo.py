"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/booking_repo.py
============================================================
Class: InMemoryBookingRepository

Responsibilities:
  - Guardar reservas en memoria (tests / desarrollo local).
  - Aplicar la misma unicidad de transactionId que el índice único de MongoDB.
  - Mantener el mismo orden que MongoDB en los listados por cliente
    (created_at DESC, sin timestamp al final).

Constraints:
  - Thread-safe: todo acceso ocurre bajo un Lock.
============================================================
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Iterable, List, Optional

from bson import ObjectId

from ....domain.entities import AssignedDecorator, Booking
from ....domain.repositories import DuplicateTransactionError

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class InMemoryBookingRepository:
    """In-memory BookingRepository (id -> Booking)."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._bookings: Dict[str, Booking] = {}

    @staticmethod
    def _copies(items: Iterable[Booking]) -> List[Booking]:
        return [deepcopy(b) for b in items]

    def _find_by_transaction(self, transaction_id: str) -> Optional[Booking]:
        for booking in self._bookings.values():
            if booking.transaction_id == transaction_id:
                return booking
        return None

    def insert(self, booking: Booking) -> str:
        booking_id = str(ObjectId())
        with self._lock:
            if booking.transaction_id and self._find_by_transaction(
                booking.transaction_id
            ):
                raise DuplicateTransactionError(booking.transaction_id)
            self._bookings[booking_id] = replace(deepcopy(booking), id=booking_id)
        return booking_id

    def get(self, booking_id: str) -> Optional[Booking]:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return deepcopy(booking) if booking else None

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Booking]:
        with self._lock:
            booking = self._find_by_transaction(transaction_id)
            return deepcopy(booking) if booking else None

    def find_by_slot(
        self,
        *,
        customer_email: str,
        decoration_id: str,
        booking_date: str,
        start_time: str,
        end_time: str,
    ) -> Optional[Booking]:
        wanted = (customer_email, decoration_id, booking_date, start_time, end_time)
        with self._lock:
            for b in self._bookings.values():
                key = (
                    b.customer_email,
                    b.decoration_id,
                    b.booking_date,
                    b.start_time,
                    b.end_time,
                )
                if key == wanted:
                    return deepcopy(b)
        return None

    def list_by_status(self, status: str) -> List[Booking]:
        with self._lock:
            return self._copies(
                b for b in self._bookings.values() if b.status == status
            )

    def list_by_customer(self, customer_email: str) -> List[Booking]:
        with self._lock:
            mine = [
                b
                for b in self._bookings.values()
                if b.customer_email == customer_email
            ]
            return self._copies(
                sorted(mine, key=lambda b: b.created_at or _EPOCH, reverse=True)
            )

    def list_by_decorator_email(
        self, email: str, *, status: str | None = None
    ) -> List[Booking]:
        with self._lock:
            return self._copies(
                b
                for b in self._bookings.values()
                if b.assigned_decorator is not None
                and b.assigned_decorator.email == email
                and (not status or b.status == status)
            )

    def assign_decorator(
        self,
        booking_id: str,
        decorator: AssignedDecorator,
        *,
        status: str,
        at: datetime,
    ) -> bool:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return False
            booking.assigned_decorator = decorator
            booking.status = status
            booking.assigned_at = at
            return True

    def update_status(self, booking_id: str, status: str, at: datetime) -> bool:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return False
            booking.status = status
            booking.updated_at = at
            return True

    def cancel_by_transaction_id(
        self, transaction_id: str, *, status: str, at: datetime
    ) -> bool:
        with self._lock:
            booking = self._find_by_transaction(transaction_id)
            if booking is None:
                return False
            booking.status = status
            booking.cancelled_at = at
            return True
