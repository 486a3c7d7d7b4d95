"""
Name: Decorator Request Endpoint Tests

Responsibilities:
  - Submit, list, approve and reject decorator promotion requests
  - Approval promotes the matching user; rejection is admin-only
"""

import pytest

from decorbook.domain.entities import ROLE_DECORATOR, ROLE_GUEST

pytestmark = pytest.mark.api

REQUEST = {
    "name": "Bob",
    "email": "bob@example.com",
    "division": "Dhaka",
    "district": "Savar",
    "phone": "01811111111",
}


def test_submit_request(client):
    response = client.post("/decorator-requests", json=REQUEST)

    assert response.status_code == 200
    body = response.json()
    assert body["_id"]
    assert body["status"] == "pending"
    assert body["role"] == ROLE_DECORATOR
    assert body["requestedAt"]


def test_second_request_is_409(client):
    client.post("/decorator-requests", json=REQUEST)

    response = client.post("/decorator-requests", json=REQUEST)

    assert response.status_code == 409
    assert response.json()["message"]


def test_request_missing_fields_is_400(client):
    response = client.post("/decorator-requests", json={"email": "bob@example.com"})

    assert response.status_code == 400


def test_list_requests_by_status(client):
    created = client.post("/decorator-requests", json=REQUEST).json()

    pending = client.get("/decorator-requests", params={"status": "pending"})
    approved = client.get("/decorator-requests", params={"status": "approved"})

    assert [r["_id"] for r in pending.json()] == [created["_id"]]
    assert approved.json() == []


def test_approve_promotes_user(client, make_user, users_repo):
    make_user("bob@example.com")
    created = client.post("/decorator-requests", json=REQUEST).json()

    response = client.patch(f"/decorator-requests/approve/{created['_id']}")

    assert response.status_code == 200
    assert response.json()["status"] == "approved"
    assert response.json()["approvedAt"]
    user = users_repo.get_by_email("bob@example.com")
    assert user.role == ROLE_DECORATOR
    assert user.work_status == "available"
    assert user.district == "Savar"


def test_approve_unknown_request_is_404(client):
    response = client.patch("/decorator-requests/approve/65f000000000000000000000")

    assert response.status_code == 404


def test_reject_requires_admin(client, auth_headers, make_user):
    make_user("bob@example.com")
    created = client.post("/decorator-requests", json=REQUEST).json()

    anonymous = client.patch(f"/decorator-requests/reject/{created['_id']}")
    as_guest = client.patch(
        f"/decorator-requests/reject/{created['_id']}",
        headers=auth_headers("bob@example.com"),
    )

    assert anonymous.status_code == 401
    assert as_guest.status_code == 403


def test_reject_as_admin(client, auth_headers, admin_user, make_user, users_repo):
    make_user("bob@example.com")
    created = client.post("/decorator-requests", json=REQUEST).json()

    response = client.patch(
        f"/decorator-requests/reject/{created['_id']}",
        headers=auth_headers("admin@example.com"),
    )

    assert response.status_code == 200
    assert response.json()["status"] == "rejected"
    assert response.json()["rejectedAt"]
    assert users_repo.get_by_email("bob@example.com").role == ROLE_GUEST
