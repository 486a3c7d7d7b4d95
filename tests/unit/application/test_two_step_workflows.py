"""
===============================================================================
CRC — tests/unit/application/test_two_step_workflows.py

Responsibilities:
    - AssignDecoratorUseCase: snapshot, status, busy flag, unknown ids.
    - Promotion workflow: request, duplicate guard, approve, reject.
    - Follow-up write: retried on transient errors, re-raised and counted
      when it keeps failing; re-issuing the command converges.

Collaborators:
    - In-memory repositories
    - create_retry_decorator (zero delays)
===============================================================================
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pymongo.errors import AutoReconnect

from decorbook.application.usecases.booking import (
    AssignDecoratorUseCase,
    BookingErrorCode,
)
from decorbook.application.usecases.promotion import (
    ApprovePromotionRequestUseCase,
    ListPromotionRequestsUseCase,
    PromotionErrorCode,
    PromotionRequestInput,
    RejectPromotionRequestUseCase,
    RequestPromotionUseCase,
)
from decorbook.crosscutting.exceptions import DatabaseError
from decorbook.domain.booking_policy import STATUS_DECORATOR_ASSIGNED, STATUS_PENDING
from decorbook.domain.entities import (
    ROLE_DECORATOR,
    ROLE_GUEST,
    WORK_STATUS_AVAILABLE,
    WORK_STATUS_BUSY,
    Booking,
    utcnow,
)
from decorbook.infrastructure.services import create_retry_decorator

pytestmark = pytest.mark.unit


@pytest.fixture
def fast_retry():
    return create_retry_decorator(max_attempts=3, base_delay=0, max_delay=0.01)


@pytest.fixture
def pending_booking(bookings_repo) -> str:
    return bookings_repo.insert(
        Booking(
            decoration_id="deco-1",
            customer_email="alice@example.com",
            booking_date="2025-03-01",
            start_time="10:00",
            end_time="12:00",
            status=STATUS_PENDING,
            transaction_id="pi_assign",
        )
    )


def _transient() -> DatabaseError:
    return DatabaseError("set_work_status failed", original_error=AutoReconnect())


# ---------------------------------------------------------------------------
# Decorator assignment
# ---------------------------------------------------------------------------


def test_assign_decorator_snapshots_and_marks_busy(
    bookings_repo, users_repo, decorator_user, pending_booking
):
    result = AssignDecoratorUseCase(bookings_repo, users_repo).execute(
        pending_booking, decorator_user.id
    )

    assert result.error is None
    booking = result.booking
    assert booking.status == STATUS_DECORATOR_ASSIGNED
    assert booking.assigned_at is not None
    assert booking.assigned_decorator.id == decorator_user.id
    assert booking.assigned_decorator.email == "deco@example.com"
    assert booking.assigned_decorator.phone == "01700000000"
    assert users_repo.get_by_id(decorator_user.id).work_status == WORK_STATUS_BUSY


def test_assignment_snapshot_ignores_later_profile_edits(
    bookings_repo, users_repo, decorator_user, pending_booking
):
    AssignDecoratorUseCase(bookings_repo, users_repo).execute(
        pending_booking, decorator_user.id
    )
    users_repo.promote_to_decorator(
        "deco@example.com",
        phone="01799999999",
        division="Dhaka",
        district="Gazipur",
        at=utcnow(),
    )

    assert bookings_repo.get(pending_booking).assigned_decorator.phone == "01700000000"


def test_assign_unknown_decorator_leaves_booking_untouched(
    bookings_repo, users_repo, pending_booking
):
    result = AssignDecoratorUseCase(bookings_repo, users_repo).execute(
        pending_booking, "65f000000000000000000000"
    )

    assert result.error.code == BookingErrorCode.NOT_FOUND
    booking = bookings_repo.get(pending_booking)
    assert booking.status == STATUS_PENDING
    assert booking.assigned_decorator is None


def test_assign_unknown_booking(bookings_repo, users_repo, decorator_user):
    result = AssignDecoratorUseCase(bookings_repo, users_repo).execute(
        "65f000000000000000000000", decorator_user.id
    )

    assert result.error.code == BookingErrorCode.NOT_FOUND
    assert users_repo.get_by_id(decorator_user.id).work_status == WORK_STATUS_AVAILABLE


def test_assign_follow_up_retries_transient_failures(
    bookings_repo, users_repo, decorator_user, pending_booking, fast_retry
):
    real = users_repo.set_work_status
    calls = {"n": 0}

    def flaky(*args, **kwargs):
        calls["n"] += 1
        if calls["n"] == 1:
            raise _transient()
        return real(*args, **kwargs)

    with patch.object(users_repo, "set_work_status", side_effect=flaky):
        result = AssignDecoratorUseCase(
            bookings_repo, users_repo, followup_retry=fast_retry
        ).execute(pending_booking, decorator_user.id)

    assert result.error is None
    assert calls["n"] == 2
    assert users_repo.get_by_id(decorator_user.id).work_status == WORK_STATUS_BUSY


def test_assign_follow_up_failure_propagates_and_reissue_converges(
    bookings_repo, users_repo, decorator_user, pending_booking, fast_retry
):
    use_case = AssignDecoratorUseCase(
        bookings_repo, users_repo, followup_retry=fast_retry
    )

    with patch.object(users_repo, "set_work_status", side_effect=_transient()):
        with patch(
            "decorbook.application.usecases.workflow.record_followup_failure"
        ) as counted:
            with pytest.raises(DatabaseError):
                use_case.execute(pending_booking, decorator_user.id)

    counted.assert_called_once_with("assign_decorator.work_status")
    # Primary write landed; the decorator is still flagged available.
    assert bookings_repo.get(pending_booking).status == STATUS_DECORATOR_ASSIGNED
    assert users_repo.get_by_id(decorator_user.id).work_status == WORK_STATUS_AVAILABLE

    again = use_case.execute(pending_booking, decorator_user.id)

    assert again.error is None
    assert users_repo.get_by_id(decorator_user.id).work_status == WORK_STATUS_BUSY


def test_follow_up_permanent_error_is_not_retried(
    bookings_repo, users_repo, decorator_user, pending_booking, fast_retry
):
    with patch.object(
        users_repo, "set_work_status", side_effect=ValueError("bad update")
    ) as failing:
        with pytest.raises(ValueError):
            AssignDecoratorUseCase(
                bookings_repo, users_repo, followup_retry=fast_retry
            ).execute(pending_booking, decorator_user.id)

    assert failing.call_count == 1


# ---------------------------------------------------------------------------
# Promotion workflow
# ---------------------------------------------------------------------------


def _promotion_input(**overrides) -> PromotionRequestInput:
    data = dict(
        name="Bob",
        email="bob@example.com",
        division="Dhaka",
        district="Savar",
        phone="01811111111",
    )
    data.update(overrides)
    return PromotionRequestInput(**data)


def test_request_promotion_starts_pending(requests_repo):
    result = RequestPromotionUseCase(requests_repo).execute(_promotion_input())

    assert result.error is None
    assert result.request.status == "pending"
    assert result.request.role == ROLE_DECORATOR
    assert result.request.requested_at is not None


def test_request_promotion_requires_fields(requests_repo):
    result = RequestPromotionUseCase(requests_repo).execute(
        _promotion_input(phone="", district=None)
    )

    assert result.error.code == PromotionErrorCode.VALIDATION_ERROR
    assert "phone" in result.error.message
    assert "district" in result.error.message


def test_second_request_for_active_email_conflicts(requests_repo):
    use_case = RequestPromotionUseCase(requests_repo)
    use_case.execute(_promotion_input())

    second = use_case.execute(_promotion_input())

    assert second.error.code == PromotionErrorCode.CONFLICT


def test_rejected_request_does_not_block_new_one(requests_repo):
    use_case = RequestPromotionUseCase(requests_repo)
    first = use_case.execute(_promotion_input())
    RejectPromotionRequestUseCase(requests_repo).execute(first.request.id)

    again = use_case.execute(_promotion_input())

    assert again.error is None


def test_approve_promotes_user(requests_repo, users_repo, make_user):
    make_user("bob@example.com", ROLE_GUEST)
    request = RequestPromotionUseCase(requests_repo).execute(_promotion_input())

    result = ApprovePromotionRequestUseCase(requests_repo, users_repo).execute(
        request.request.id
    )

    assert result.error is None
    assert result.request.status == "approved"
    assert result.request.approved_at is not None
    user = users_repo.get_by_email("bob@example.com")
    assert user.role == ROLE_DECORATOR
    assert user.work_status == WORK_STATUS_AVAILABLE
    assert user.phone == "01811111111"
    assert user.district == "Savar"
    assert user.updated_at is not None


def test_approve_without_matching_user_keeps_request_approved(
    requests_repo, users_repo
):
    request = RequestPromotionUseCase(requests_repo).execute(_promotion_input())

    result = ApprovePromotionRequestUseCase(requests_repo, users_repo).execute(
        request.request.id
    )

    assert result.error is None
    assert result.request.status == "approved"


def test_approve_unknown_request(requests_repo, users_repo):
    result = ApprovePromotionRequestUseCase(requests_repo, users_repo).execute(
        "65f000000000000000000000"
    )

    assert result.error.code == PromotionErrorCode.NOT_FOUND


def test_reject_leaves_user_role_unchanged(requests_repo, users_repo, make_user):
    make_user("bob@example.com", ROLE_GUEST)
    request = RequestPromotionUseCase(requests_repo).execute(_promotion_input())

    result = RejectPromotionRequestUseCase(requests_repo).execute(request.request.id)

    assert result.request.status == "rejected"
    assert result.request.rejected_at is not None
    assert users_repo.get_by_email("bob@example.com").role == ROLE_GUEST


def test_reject_unknown_request(requests_repo):
    result = RejectPromotionRequestUseCase(requests_repo).execute("nope")

    assert result.error.code == PromotionErrorCode.NOT_FOUND


def test_list_requests_by_status(requests_repo):
    use_case = RequestPromotionUseCase(requests_repo)
    keep = use_case.execute(_promotion_input())
    drop = use_case.execute(_promotion_input(email="carol@example.com"))
    RejectPromotionRequestUseCase(requests_repo).execute(drop.request.id)

    pending = ListPromotionRequestsUseCase(requests_repo).execute(status="pending")
    everything = ListPromotionRequestsUseCase(requests_repo).execute()

    assert [r.id for r in pending.requests] == [keep.request.id]
    assert len(everything.requests) == 2
