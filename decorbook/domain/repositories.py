"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the four collections (ports).
- Keep the application layer independent from MongoDB.
- Enable in-memory implementations for tests and local runs.

Collaborators
- domain.entities: User, Decoration, Booking, AssignedDecorator, PromotionRequest
- infrastructure.repositories: mongo/*, in_memory/* implementations

Constraints
- Pure interfaces only: no side effects, no driver imports.
- Ids are strings; an id the store cannot parse behaves like a missing document.
- Update methods return True when a document matched.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol

from .entities import AssignedDecorator, Booking, Decoration, PromotionRequest, User


class DuplicateTransactionError(Exception):
    """A booking with the same transactionId already exists in the store."""

    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"booking for transaction {transaction_id} already exists")


class UserRepository(Protocol):
    """R: Users collection, keyed by email."""

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        ...

    def insert(self, user: User) -> str:
        """R: Insert a new user and return its id."""
        ...

    def touch_last_login(self, email: str, at: datetime) -> bool:
        """R: Stamp last_loggedIn on an existing user."""
        ...

    def list_users(self) -> List[User]:
        ...

    def list_decorators(
        self, *, division: str | None = None, district: str | None = None
    ) -> List[User]:
        """R: Users with role=decorator, optionally filtered by exact location."""
        ...

    def set_role(
        self, email: str, role: str, *, work_status: str | None, at: datetime
    ) -> bool:
        """
        R: Change a user's role.

        work_status=None removes the field from the document.
        """
        ...

    def set_work_status(self, user_id: str, work_status: str, at: datetime) -> bool:
        ...

    def promote_to_decorator(
        self,
        email: str,
        *,
        phone: str,
        division: str,
        district: str,
        at: datetime,
    ) -> bool:
        """R: role=decorator, work_Status=available and contact fields synced."""
        ...


class DecorationRepository(Protocol):
    """R: Service listings collection."""

    def insert(self, decoration: Decoration) -> str:
        ...

    def get(self, decoration_id: str) -> Optional[Decoration]:
        ...

    def list_decorations(self) -> List[Decoration]:
        ...

    def update(self, decoration_id: str, changes: Dict[str, Any]) -> bool:
        """R: Apply field changes (domain field names) and stamp updated_at."""
        ...

    def delete(self, decoration_id: str) -> bool:
        ...


class BookingRepository(Protocol):
    """R: Bookings collection. Bookings are never deleted."""

    def insert(self, booking: Booking) -> str:
        """
        R: Insert a booking and return its id.

        Raises:
            DuplicateTransactionError: transactionId already stored.
        """
        ...

    def get(self, booking_id: str) -> Optional[Booking]:
        ...

    def find_by_transaction_id(self, transaction_id: str) -> Optional[Booking]:
        ...

    def find_by_slot(
        self,
        *,
        customer_email: str,
        decoration_id: str,
        booking_date: str,
        start_time: str,
        end_time: str,
    ) -> Optional[Booking]:
        """R: Exact tuple lookup (no overlap check)."""
        ...

    def list_by_status(self, status: str) -> List[Booking]:
        ...

    def list_by_customer(self, customer_email: str) -> List[Booking]:
        """R: Customer bookings, newest first."""
        ...

    def list_by_decorator_email(
        self, email: str, *, status: str | None = None
    ) -> List[Booking]:
        ...

    def assign_decorator(
        self,
        booking_id: str,
        decorator: AssignedDecorator,
        *,
        status: str,
        at: datetime,
    ) -> bool:
        ...

    def update_status(self, booking_id: str, status: str, at: datetime) -> bool:
        ...

    def cancel_by_transaction_id(
        self, transaction_id: str, *, status: str, at: datetime
    ) -> bool:
        ...


class PromotionRequestRepository(Protocol):
    """R: Decorator promotion requests collection."""

    def insert(self, request: PromotionRequest) -> str:
        ...

    def get(self, request_id: str) -> Optional[PromotionRequest]:
        ...

    def find_active_by_email(self, email: str) -> Optional[PromotionRequest]:
        """R: A pending or approved request for the email, if any."""
        ...

    def list_requests(self, *, status: str | None = None) -> List[PromotionRequest]:
        ...

    def mark_approved(self, request_id: str, at: datetime) -> bool:
        ...

    def mark_rejected(self, request_id: str, at: datetime) -> bool:
        ...
