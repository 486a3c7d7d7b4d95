"""
===============================================================================
CRC — tests/unit/application/test_user_and_catalog_use_cases.py

Responsibilities:
    - Login upsert: first login creates a guest, later logins only stamp
      last_loggedIn.
    - Role change: work_Status follows the new role.
    - Service listing create/update/delete rules.
    - Decorator availability query.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from decorbook.application.usecases.booking import FindAvailableDecoratorsUseCase
from decorbook.application.usecases.catalog import (
    CreateDecorationUseCase,
    DecorationErrorCode,
    DeleteDecorationUseCase,
    GetDecorationUseCase,
    ListDecorationsUseCase,
    UpdateDecorationUseCase,
)
from decorbook.application.usecases.users import (
    GetUserRoleUseCase,
    ListDecoratorsUseCase,
    UpdateUserRoleUseCase,
    UpsertUserUseCase,
    UserErrorCode,
    UserLoginInput,
)
from decorbook.domain.entities import (
    ROLE_ADMIN,
    ROLE_DECORATOR,
    ROLE_GUEST,
    WORK_STATUS_AVAILABLE,
    Decoration,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def test_first_login_creates_guest(users_repo):
    result = UpsertUserUseCase(users_repo).execute(
        UserLoginInput(email="new@example.com", name="New", photo="p.png")
    )

    assert result.error is None
    assert result.created is True
    user = users_repo.get_by_id(result.user_id)
    assert user.role == ROLE_GUEST
    assert user.last_logged_in is not None
    assert user.photo == "p.png"


def test_repeat_login_only_stamps_last_login(users_repo, make_user):
    past = datetime(2024, 1, 1, tzinfo=timezone.utc)
    existing = make_user("old@example.com", ROLE_ADMIN, last_logged_in=past)

    result = UpsertUserUseCase(users_repo).execute(
        UserLoginInput(email="old@example.com", name="Renamed")
    )

    assert result.created is False
    assert result.user_id == existing.id
    user = users_repo.get_by_email("old@example.com")
    assert user.name == existing.name
    assert user.role == ROLE_ADMIN
    assert user.last_logged_in > past


def test_login_requires_email(users_repo):
    result = UpsertUserUseCase(users_repo).execute(UserLoginInput(email="  "))

    assert result.error.code == UserErrorCode.VALIDATION_ERROR
    assert users_repo.list_users() == []


def test_role_lookup(users_repo, admin_user):
    use_case = GetUserRoleUseCase(users_repo)

    assert use_case.execute("admin@example.com") == ROLE_ADMIN
    assert use_case.execute("ghost@example.com") is None


def test_promoting_to_decorator_sets_available(users_repo, make_user):
    make_user("g@example.com")

    result = UpdateUserRoleUseCase(users_repo).execute("g@example.com", ROLE_DECORATOR)

    assert result.error is None
    assert result.user.role == ROLE_DECORATOR
    assert result.user.work_status == WORK_STATUS_AVAILABLE
    assert result.user.updated_at is not None


def test_other_roles_clear_work_status(users_repo, decorator_user):
    result = UpdateUserRoleUseCase(users_repo).execute("deco@example.com", ROLE_GUEST)

    assert result.user.role == ROLE_GUEST
    assert result.user.work_status is None


@pytest.mark.parametrize(
    "email,role,code",
    [
        (None, ROLE_ADMIN, UserErrorCode.VALIDATION_ERROR),
        ("g@example.com", "superuser", UserErrorCode.VALIDATION_ERROR),
        ("ghost@example.com", ROLE_ADMIN, UserErrorCode.NOT_FOUND),
    ],
)
def test_role_change_errors(users_repo, make_user, email, role, code):
    make_user("g@example.com")

    result = UpdateUserRoleUseCase(users_repo).execute(email, role)

    assert result.error.code == code
    assert users_repo.get_by_email("g@example.com").role == ROLE_GUEST


def test_list_decorators_only_returns_decorators(users_repo, decorator_user, make_user):
    make_user("g@example.com")

    result = ListDecoratorsUseCase(users_repo).execute()

    assert [u.email for u in result.users] == ["deco@example.com"]


# ---------------------------------------------------------------------------
# Service listings
# ---------------------------------------------------------------------------


def _listing(**overrides) -> Decoration:
    data = dict(name="Birthday Arch", category="birthday", description="Arch", price=80)
    data.update(overrides)
    return Decoration(**data)


def test_create_listing_stamps_timestamps(decorations_repo):
    result = CreateDecorationUseCase(decorations_repo).execute(_listing())

    assert result.error is None
    assert result.decoration.id is not None
    assert result.decoration.created_at is not None
    assert ListDecorationsUseCase(decorations_repo).execute().decorations[0].name == (
        "Birthday Arch"
    )


@pytest.mark.parametrize(
    "overrides", [{"name": " "}, {"category": ""}, {"price": -5}]
)
def test_create_listing_validation(decorations_repo, overrides):
    result = CreateDecorationUseCase(decorations_repo).execute(_listing(**overrides))

    assert result.error.code == DecorationErrorCode.VALIDATION_ERROR
    assert decorations_repo.list_decorations() == []


def test_update_listing_applies_only_given_fields(decorations_repo, decoration):
    result = UpdateDecorationUseCase(decorations_repo).execute(
        decoration.id, {"price": 300.0, "id": "hijack"}
    )

    assert result.error is None
    assert result.decoration.id == decoration.id
    assert result.decoration.price == 300.0
    assert result.decoration.name == "Wedding Stage"


def test_update_listing_errors(decorations_repo, decoration):
    use_case = UpdateDecorationUseCase(decorations_repo)

    assert use_case.execute(decoration.id, {}).error.code == (
        DecorationErrorCode.VALIDATION_ERROR
    )
    assert use_case.execute("65f000000000000000000000", {"price": 1}).error.code == (
        DecorationErrorCode.NOT_FOUND
    )


def test_delete_listing(decorations_repo, decoration):
    use_case = DeleteDecorationUseCase(decorations_repo)

    assert use_case.execute(decoration.id).deleted is True
    assert use_case.execute(decoration.id).error.code == DecorationErrorCode.NOT_FOUND
    assert GetDecorationUseCase(decorations_repo).execute(decoration.id).error.code == (
        DecorationErrorCode.NOT_FOUND
    )


# ---------------------------------------------------------------------------
# Availability
# ---------------------------------------------------------------------------


def test_available_decorators_without_schedule(users_repo, decorator_user):
    result = FindAvailableDecoratorsUseCase(users_repo).execute(
        "Dhaka", "Gazipur", "2025-03-01"
    )

    assert result.available is True
    assert [d.email for d in result.decorators] == ["deco@example.com"]


def test_available_decorators_filter_by_working_date(users_repo, make_user):
    schedule = dict(start_time="09:00", end_time="17:00")
    make_user(
        "same@example.com",
        ROLE_DECORATOR,
        division="Dhaka",
        district="Gazipur",
        working_date="2025-03-01T00:00:00",
        **schedule,
    )
    make_user(
        "other@example.com",
        ROLE_DECORATOR,
        division="Dhaka",
        district="Gazipur",
        working_date="2025-03-02",
        **schedule,
    )

    result = FindAvailableDecoratorsUseCase(users_repo).execute(
        "Dhaka", "Gazipur", "2025-03-01"
    )

    assert [d.email for d in result.decorators] == ["same@example.com"]


def test_available_decorators_other_district(users_repo, decorator_user):
    result = FindAvailableDecoratorsUseCase(users_repo).execute(
        "Dhaka", "Savar", "2025-03-01"
    )

    assert result.available is False
    assert result.decorators == []


@pytest.mark.parametrize(
    "args",
    [
        (None, "Gazipur", "2025-03-01"),
        ("Dhaka", "", "2025-03-01"),
        ("Dhaka", "Gazipur", None),
    ],
)
def test_available_decorators_missing_query_is_empty(users_repo, decorator_user, args):
    result = FindAvailableDecoratorsUseCase(users_repo).execute(*args)

    assert result.available is False
    assert result.decorators == []
