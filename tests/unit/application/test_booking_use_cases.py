"""
===============================================================================
CRC — tests/unit/application/test_booking_use_cases.py

Responsibilities:
    - CreateBookingUseCase: required fields, exact-slot duplicate guard.
    - UpdateBookingStatusUseCase: open status table, unknown booking.
    - CancelBookingUseCase: lookup by transaction id.
    - Booking listings (pending queue, customer history, decorator tasks).

Collaborators:
    - In-memory repositories from the container fixtures
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from decorbook.application.usecases.booking import (
    BookingErrorCode,
    CancelBookingUseCase,
    CreateBookingInput,
    CreateBookingUseCase,
    ListAssignedBookingsUseCase,
    ListCustomerBookingsUseCase,
    ListPendingBookingsUseCase,
    UpdateBookingStatusUseCase,
)
from decorbook.domain.booking_policy import (
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    STATUS_DECORATOR_ASSIGNED,
    STATUS_PENDING,
)
from decorbook.domain.entities import AssignedDecorator, Booking

pytestmark = pytest.mark.unit


def _input(**overrides) -> CreateBookingInput:
    data = dict(
        decoration_id="deco-1",
        booking_date="2025-03-01",
        start_time="10:00",
        end_time="12:00",
        customer_email="alice@example.com",
        customer_name="Alice",
    )
    data.update(overrides)
    return CreateBookingInput(**data)


def _stored_booking(repo, **overrides) -> str:
    fields = dict(
        decoration_id="deco-1",
        customer_email="alice@example.com",
        booking_date="2025-03-01",
        start_time="10:00",
        end_time="12:00",
        status=STATUS_PENDING,
        transaction_id="pi_123",
        created_at=datetime.now(timezone.utc),
    )
    fields.update(overrides)
    return repo.insert(Booking(**fields))


# ---------------------------------------------------------------------------
# CreateBookingUseCase
# ---------------------------------------------------------------------------


def test_create_booking_stamps_initial_state(bookings_repo):
    result = CreateBookingUseCase(bookings_repo).execute(_input())

    assert result.error is None
    booking = bookings_repo.get(result.booking_id)
    assert booking.status == STATUS_PENDING
    assert booking.payment_status == "paid"
    assert booking.assigned_decorator is None
    assert booking.booked_at is not None


def test_create_booking_identical_slot_conflicts(bookings_repo):
    use_case = CreateBookingUseCase(bookings_repo)
    assert use_case.execute(_input()).error is None

    second = use_case.execute(_input())

    assert second.error is not None
    assert second.error.code == BookingErrorCode.CONFLICT
    assert len(bookings_repo.list_by_customer("alice@example.com")) == 1


def test_create_booking_one_minute_later_is_not_a_conflict(bookings_repo):
    use_case = CreateBookingUseCase(bookings_repo)
    use_case.execute(_input())

    result = use_case.execute(_input(start_time="10:01"))

    assert result.error is None


def test_create_booking_reports_every_missing_field(bookings_repo):
    result = CreateBookingUseCase(bookings_repo).execute(
        _input(decoration_id="", customer_email="  ", end_time="")
    )

    assert result.error.code == BookingErrorCode.VALIDATION_ERROR
    assert "decorationId" in result.error.message
    assert "endTime" in result.error.message
    assert "userInfo.userEmail" in result.error.message


def test_create_booking_keeps_extra_fields(bookings_repo):
    result = CreateBookingUseCase(bookings_repo).execute(
        _input(extra={"notes": "blue theme"})
    )

    assert bookings_repo.get(result.booking_id).extra == {"notes": "blue theme"}


# ---------------------------------------------------------------------------
# UpdateBookingStatusUseCase
# ---------------------------------------------------------------------------


def test_update_status_accepts_backwards_transition(bookings_repo):
    booking_id = _stored_booking(bookings_repo, status=STATUS_COMPLETED)

    result = UpdateBookingStatusUseCase(bookings_repo).execute(
        booking_id, STATUS_PENDING
    )

    assert result.error is None
    assert result.booking.status == STATUS_PENDING
    assert result.booking.updated_at is not None


def test_update_status_rejects_unknown_status(bookings_repo):
    booking_id = _stored_booking(bookings_repo)

    result = UpdateBookingStatusUseCase(bookings_repo).execute(booking_id, "teleported")

    assert result.error.code == BookingErrorCode.VALIDATION_ERROR
    assert bookings_repo.get(booking_id).status == STATUS_PENDING


def test_update_status_unknown_booking(bookings_repo):
    result = UpdateBookingStatusUseCase(bookings_repo).execute(
        "65f000000000000000000000", STATUS_COMPLETED
    )

    assert result.error.code == BookingErrorCode.NOT_FOUND


# ---------------------------------------------------------------------------
# CancelBookingUseCase
# ---------------------------------------------------------------------------


def test_cancel_by_transaction_id(bookings_repo):
    _stored_booking(bookings_repo, transaction_id="pi_cancel")

    result = CancelBookingUseCase(bookings_repo).execute("pi_cancel")

    assert result.error is None
    assert result.booking.status == STATUS_CANCELLED
    assert result.booking.cancelled_at is not None


def test_cancel_unknown_transaction(bookings_repo):
    result = CancelBookingUseCase(bookings_repo).execute("pi_missing")

    assert result.error.code == BookingErrorCode.NOT_FOUND


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


def test_pending_queue_only_lists_pending(bookings_repo):
    _stored_booking(bookings_repo, transaction_id="pi_1")
    _stored_booking(bookings_repo, transaction_id="pi_2", status=STATUS_COMPLETED)

    result = ListPendingBookingsUseCase(bookings_repo).execute()

    assert [b.transaction_id for b in result.bookings] == ["pi_1"]


def test_customer_history_newest_first(bookings_repo):
    now = datetime.now(timezone.utc)
    _stored_booking(bookings_repo, transaction_id="pi_old", created_at=now)
    _stored_booking(
        bookings_repo,
        transaction_id="pi_new",
        created_at=now + timedelta(minutes=5),
    )

    result = ListCustomerBookingsUseCase(bookings_repo).execute("alice@example.com")

    assert [b.transaction_id for b in result.bookings] == ["pi_new", "pi_old"]


def test_assigned_tasks_filter_by_decorator_and_status(bookings_repo):
    snapshot = AssignedDecorator(
        id="u1", name="Dana", email="deco@example.com", phone=None
    )
    _stored_booking(
        bookings_repo,
        transaction_id="pi_a",
        assigned_decorator=snapshot,
        status=STATUS_DECORATOR_ASSIGNED,
    )
    _stored_booking(
        bookings_repo,
        transaction_id="pi_b",
        assigned_decorator=snapshot,
        status=STATUS_COMPLETED,
    )
    use_case = ListAssignedBookingsUseCase(bookings_repo)

    everything = use_case.execute("deco@example.com")
    completed = use_case.execute("deco@example.com", status=STATUS_COMPLETED)

    assert {b.transaction_id for b in everything.bookings} == {"pi_a", "pi_b"}
    assert [b.transaction_id for b in completed.bookings] == ["pi_b"]


def test_assigned_tasks_require_email(bookings_repo):
    result = ListAssignedBookingsUseCase(bookings_repo).execute(None)

    assert result.error.code == BookingErrorCode.VALIDATION_ERROR
