"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment before decorbook is imported
    (APP_ENV=test -> in-memory repositories, HS256 identity, fake payments)
  - Reset container singletons between tests
  - Provide repositories, gateway, token and client fixtures

Collaborators:
  - pytest
  - fastapi.testclient.TestClient
  - decorbook.container

Notes:
  - Each test gets fresh in-memory stores (reset_container is autouse)
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["IDENTITY_PROVIDER"] = "jwt"
os.environ["JWT_SECRET"] = "test-secret-for-decorbook-suite-0123456789"
os.environ["FAKE_PAYMENTS"] = "1"
os.environ.setdefault("LOG_JSON", "0")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Callable, Dict  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from decorbook import container  # noqa: E402
from decorbook.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from decorbook.domain.entities import (  # noqa: E402
    ROLE_ADMIN,
    ROLE_DECORATOR,
    ROLE_GUEST,
    WORK_STATUS_AVAILABLE,
    Decoration,
    User,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


@pytest.fixture(autouse=True)
def _fresh_container():
    app_config.get_settings.cache_clear()
    container.reset_container()
    yield
    container.reset_container()


# ============================================================================
# Repositories / services (the same singletons the app resolves)
# ============================================================================


@pytest.fixture
def users_repo():
    return container.get_user_repository()


@pytest.fixture
def decorations_repo():
    return container.get_decoration_repository()


@pytest.fixture
def bookings_repo():
    return container.get_booking_repository()


@pytest.fixture
def requests_repo():
    return container.get_promotion_request_repository()


@pytest.fixture
def payment_gateway():
    return container.get_payment_gateway()


# ============================================================================
# Entity factories
# ============================================================================


@pytest.fixture
def make_user(users_repo) -> Callable[..., User]:
    def _make(email: str, role: str | None = ROLE_GUEST, **fields) -> User:
        user = User(email=email, name=fields.pop("name", email.split("@")[0]))
        user.role = role
        for key, value in fields.items():
            setattr(user, key, value)
        user_id = users_repo.insert(user)
        return users_repo.get_by_id(user_id)

    return _make


@pytest.fixture
def admin_user(make_user) -> User:
    return make_user("admin@example.com", ROLE_ADMIN)


@pytest.fixture
def decorator_user(make_user) -> User:
    return make_user(
        "deco@example.com",
        ROLE_DECORATOR,
        name="Dana Decorator",
        phone="01700000000",
        division="Dhaka",
        district="Gazipur",
        work_status=WORK_STATUS_AVAILABLE,
    )


@pytest.fixture
def decoration(decorations_repo) -> Decoration:
    decoration_id = decorations_repo.insert(
        Decoration(
            name="Wedding Stage",
            category="wedding",
            description="Full stage setup",
            price=250.0,
        )
    )
    return decorations_repo.get(decoration_id)


# ============================================================================
# HTTP
# ============================================================================


@pytest.fixture
def client() -> TestClient:
    from decorbook.api.main import app

    return TestClient(app)


@pytest.fixture
def auth_headers() -> Callable[[str], Dict[str, str]]:
    def _headers(email: str) -> Dict[str, str]:
        token = container.get_identity_verifier().issue_token(email)
        return {"Authorization": f"Bearer {token}"}

    return _headers
