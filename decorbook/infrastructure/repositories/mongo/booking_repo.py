"""
Name: MongoDB Booking Repository

Responsibilities:
  - Persistir reservas en la colección "bookings" (nunca se borran)
  - Mapear documentos (decorationId, transactionId, assignedDecorator, ...) a
    entidades Booking; los campos desconocidos viajan en Booking.extra
  - Exponer el índice único de transactionId como DuplicateTransactionError
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from ....domain.entities import AssignedDecorator, Booking
from ....domain.repositories import DuplicateTransactionError
from ...db.client import BOOKINGS_COLLECTION
from .base import compact, id_of, to_object_id, translate_errors

_REPO = "MongoBookingRepository"

_KNOWN_KEYS = {
    "_id",
    "decorationId",
    "decorationName",
    "category",
    "transactionId",
    "customer",
    "customerName",
    "status",
    "payment_status",
    "price",
    "assignedDecorator",
    "bookingDate",
    "startTime",
    "endTime",
    "division",
    "district",
    "phone",
    "created_at",
    "bookedAt",
    "assignedAt",
    "cancelledAt",
    "updatedAt",
}


def _snapshot_to_doc(snapshot: AssignedDecorator) -> Dict[str, Any]:
    return {
        "id": snapshot.id,
        "name": snapshot.name,
        "email": snapshot.email,
        "phone": snapshot.phone,
    }


def _doc_to_snapshot(raw: Any) -> Optional[AssignedDecorator]:
    if not isinstance(raw, dict):
        return None
    return AssignedDecorator(
        id=str(raw.get("id") or ""),
        name=raw.get("name"),
        email=raw.get("email", ""),
        phone=raw.get("phone"),
    )


def _doc_to_booking(doc: Dict[str, Any]) -> Booking:
    price = doc.get("price")
    return Booking(
        id=id_of(doc),
        decoration_id=str(doc.get("decorationId", "")),
        decoration_name=doc.get("decorationName"),
        category=doc.get("category"),
        transaction_id=doc.get("transactionId"),
        customer_email=doc.get("customer", ""),
        customer_name=doc.get("customerName"),
        status=doc.get("status", ""),
        payment_status=doc.get("payment_status"),
        price=float(price) if price is not None else None,
        assigned_decorator=_doc_to_snapshot(doc.get("assignedDecorator")),
        booking_date=doc.get("bookingDate", ""),
        start_time=doc.get("startTime", ""),
        end_time=doc.get("endTime", ""),
        division=doc.get("division"),
        district=doc.get("district"),
        phone=doc.get("phone"),
        created_at=doc.get("created_at"),
        booked_at=doc.get("bookedAt"),
        assigned_at=doc.get("assignedAt"),
        cancelled_at=doc.get("cancelledAt"),
        updated_at=doc.get("updatedAt"),
        extra={k: v for k, v in doc.items() if k not in _KNOWN_KEYS},
    )


def _storable_extra(extra: Dict[str, Any]) -> Dict[str, Any]:
    """Claves del cliente que no pisan un campo mapeado ni llegan a un operador."""
    return {
        k: v
        for k, v in extra.items()
        if k not in _KNOWN_KEYS and not k.startswith(("$", "_")) and "." not in k
    }


def _booking_to_doc(booking: Booking) -> Dict[str, Any]:
    doc = _storable_extra(booking.extra)
    doc.update(
        compact(
            {
                "decorationId": booking.decoration_id,
                "decorationName": booking.decoration_name,
                "category": booking.category,
                "transactionId": booking.transaction_id,
                "customer": booking.customer_email,
                "customerName": booking.customer_name,
                "status": booking.status,
                "payment_status": booking.payment_status,
                "price": booking.price,
                "bookingDate": booking.booking_date,
                "startTime": booking.start_time,
                "endTime": booking.end_time,
                "division": booking.division,
                "district": booking.district,
                "phone": booking.phone,
                "created_at": booking.created_at,
                "bookedAt": booking.booked_at,
                "assignedAt": booking.assigned_at,
                "cancelledAt": booking.cancelled_at,
                "updatedAt": booking.updated_at,
            }
        )
    )
    # Se guarda null explícito hasta que un admin asigna a alguien.
    doc["assignedDecorator"] = (
        _snapshot_to_doc(booking.assigned_decorator)
        if booking.assigned_decorator
        else None
    )
    return doc


class MongoBookingRepository:
    """R: BookingRepository sobre la colección bookings."""

    def __init__(self, db: Database) -> None:
        self._bookings: Collection = db[BOOKINGS_COLLECTION]

    def insert(self, booking: Booking) -> str:
        with translate_errors(_REPO, "insert"):
            try:
                result = self._bookings.insert_one(_booking_to_doc(booking))
            except DuplicateKeyError as exc:
                raise DuplicateTransactionError(booking.transaction_id or "") from exc
        return str(result.inserted_id)

    def get(self, booking_id: str) -> Optional[Booking]:
        oid = to_object_id(booking_id)
        if oid is None:
            return None
        with translate_errors(_REPO, "get"):
            doc = self._bookings.find_one({"_id": oid})
        return _doc_to_booking(doc) if doc else None

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Booking]:
        with translate_errors(_REPO, "find_by_transaction_id"):
            doc = self._bookings.find_one({"transactionId": transaction_id})
        return _doc_to_booking(doc) if doc else None

    def find_by_slot(
        self,
        *,
        customer_email: str,
        decoration_id: str,
        booking_date: str,
        start_time: str,
        end_time: str,
    ) -> Optional[Booking]:
        query = {
            "customer": customer_email,
            "decorationId": decoration_id,
            "bookingDate": booking_date,
            "startTime": start_time,
            "endTime": end_time,
        }
        with translate_errors(_REPO, "find_by_slot"):
            doc = self._bookings.find_one(query)
        return _doc_to_booking(doc) if doc else None

    def list_by_status(self, status: str) -> List[Booking]:
        with translate_errors(_REPO, "list_by_status"):
            docs = list(self._bookings.find({"status": status}))
        return [_doc_to_booking(d) for d in docs]

    def list_by_customer(self, customer_email: str) -> List[Booking]:
        with translate_errors(_REPO, "list_by_customer"):
            docs = list(
                self._bookings.find({"customer": customer_email}).sort(
                    "created_at", DESCENDING
                )
            )
        return [_doc_to_booking(d) for d in docs]

    def list_by_decorator_email(
        self, email: str, *, status: str | None = None
    ) -> List[Booking]:
        query: Dict[str, Any] = {"assignedDecorator.email": email}
        if status:
            query["status"] = status
        with translate_errors(_REPO, "list_by_decorator_email"):
            docs = list(self._bookings.find(query))
        return [_doc_to_booking(d) for d in docs]

    def assign_decorator(
        self,
        booking_id: str,
        decorator: AssignedDecorator,
        *,
        status: str,
        at: datetime,
    ) -> bool:
        oid = to_object_id(booking_id)
        if oid is None:
            return False
        with translate_errors(_REPO, "assign_decorator"):
            result = self._bookings.update_one(
                {"_id": oid},
                {
                    "$set": {
                        "assignedDecorator": _snapshot_to_doc(decorator),
                        "status": status,
                        "assignedAt": at,
                    }
                },
            )
        return result.matched_count > 0

    def update_status(self, booking_id: str, status: str, at: datetime) -> bool:
        oid = to_object_id(booking_id)
        if oid is None:
            return False
        with translate_errors(_REPO, "update_status"):
            result = self._bookings.update_one(
                {"_id": oid}, {"$set": {"status": status, "updatedAt": at}}
            )
        return result.matched_count > 0

    def cancel_by_transaction_id(
        self, transaction_id: str, *, status: str, at: datetime
    ) -> bool:
        with translate_errors(_REPO, "cancel_by_transaction_id"):
            result = self._bookings.update_one(
                {"transactionId": transaction_id},
                {"$set": {"status": status, "cancelledAt": at}},
            )
        return result.matched_count > 0
