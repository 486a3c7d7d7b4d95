"""
Name: Booking and Payment Endpoint Tests

Responsibilities:
  - Checkout -> payment confirmation -> booking (idempotent)
  - Pre-payment booking creation and its duplicate guard
  - Admin queue and decorator assignment (401 / 403 / 404 paths)
  - Status changes, cancellation and the per-user listings
"""

import pytest

pytestmark = pytest.mark.api


def _checkout_body(decoration_id: str) -> dict:
    return {
        "decorationId": decoration_id,
        "name": "Wedding Stage",
        "description": "Full stage setup",
        "price": 250,
        "customer": {"email": "alice@example.com", "name": "Alice"},
        "bookingDate": "2025-03-01",
        "startTime": "10:00",
        "endTime": "12:00",
        "division": "Dhaka",
        "district": "Gazipur",
        "phone": "01711111111",
    }


def _paid_booking(client, payment_gateway, decoration) -> dict:
    url = client.post(
        "/create-checkout-session", json=_checkout_body(decoration.id)
    ).json()["url"]
    session_id = url.rsplit("/", 1)[-1]
    payment_gateway.complete_session(session_id)
    return client.post("/payment-success", json={"sessionId": session_id}).json()


def _booking_body(**overrides) -> dict:
    body = {
        "decorationId": "d1",
        "decorationName": "Wedding Stage",
        "bookingDate": "2025-03-01",
        "startTime": "10:00",
        "endTime": "12:00",
        "userInfo": {"userEmail": "alice@example.com", "userName": "Alice"},
    }
    body.update(overrides)
    return body


# ---------------------------------------------------------------------------
# Checkout and confirmation
# ---------------------------------------------------------------------------


def test_checkout_returns_redirect_url(client, decoration):
    response = client.post(
        "/create-checkout-session", json=_checkout_body(decoration.id)
    )

    assert response.status_code == 200
    assert response.json()["url"].startswith("https://checkout.fake.local/pay/")


def test_checkout_requires_customer_email(client, decoration):
    body = _checkout_body(decoration.id)
    body["customer"] = {}

    response = client.post("/create-checkout-session", json=body)

    assert response.status_code == 400


def test_payment_success_creates_one_booking(
    client, payment_gateway, decoration, bookings_repo
):
    first = _paid_booking(client, payment_gateway, decoration)

    assert first["success"] is True
    assert first["created"] is True
    booking = bookings_repo.get(first["bookingId"])
    assert booking.transaction_id == first["transactionId"]
    assert booking.status == "pending"
    assert booking.price == 250.0
    assert booking.decoration_name == "Wedding Stage"

    session_id = "cs_test_000001"
    again = client.post("/payment-success", json={"sessionId": session_id}).json()
    assert again["created"] is False
    assert again["bookingId"] == first["bookingId"]
    assert len(bookings_repo.list_by_customer("alice@example.com")) == 1


def test_payment_success_unpaid_session(client, decoration, bookings_repo):
    url = client.post(
        "/create-checkout-session", json=_checkout_body(decoration.id)
    ).json()["url"]

    response = client.post(
        "/payment-success", json={"sessionId": url.rsplit("/", 1)[-1]}
    )

    assert response.status_code == 200
    assert response.json()["created"] is False
    assert bookings_repo.list_by_status("pending") == []


@pytest.mark.parametrize("body", [{}, {"sessionId": "cs_test_unknown"}])
def test_payment_success_unknown_session_is_404(client, body):
    assert client.post("/payment-success", json=body).status_code == 404


# ---------------------------------------------------------------------------
# Pre-payment booking
# ---------------------------------------------------------------------------


def test_create_booking(client, bookings_repo):
    response = client.post("/userBooks", json=_booking_body(notes="blue theme"))

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Booking successful"
    stored = bookings_repo.get(body["insertedId"])
    assert stored.customer_email == "alice@example.com"
    assert stored.extra == {"notes": "blue theme"}


def test_create_booking_ignores_client_transaction_id(
    client, payment_gateway, decoration, bookings_repo
):
    response = client.post(
        "/userBooks",
        json=_booking_body(
            transactionId="pi_test_000001", _id="forged", status="completed"
        ),
    )

    stored = bookings_repo.get(response.json()["insertedId"])
    assert stored.transaction_id is None
    assert stored.status == "pending"
    assert stored.extra == {}

    paid = _paid_booking(client, payment_gateway, decoration)
    assert paid["created"] is True
    assert paid["transactionId"] == "pi_test_000001"


def test_create_booking_duplicate_slot_is_409(client):
    client.post("/userBooks", json=_booking_body())

    response = client.post("/userBooks", json=_booking_body())

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"


def test_create_booking_missing_fields_is_400(client):
    response = client.post("/userBooks", json={"decorationId": "d1"})

    assert response.status_code == 400
    assert "bookingDate" in response.json()["message"]


# ---------------------------------------------------------------------------
# Admin queue and assignment
# ---------------------------------------------------------------------------


def test_pending_queue_requires_admin(client, auth_headers, make_user):
    make_user("alice@example.com")

    assert client.get("/bookings").status_code == 401
    response = client.get("/bookings", headers=auth_headers("alice@example.com"))
    assert response.status_code == 403


def test_pending_queue_for_admin(
    client, auth_headers, admin_user, payment_gateway, decoration
):
    paid = _paid_booking(client, payment_gateway, decoration)

    response = client.get("/bookings", headers=auth_headers("admin@example.com"))

    assert response.status_code == 200
    [item] = response.json()
    assert item["_id"] == paid["bookingId"]
    assert item["customer"] == "alice@example.com"
    assert item["assignedDecorator"] is None


def test_assign_decorator(
    client,
    auth_headers,
    admin_user,
    decorator_user,
    payment_gateway,
    decoration,
    users_repo,
):
    paid = _paid_booking(client, payment_gateway, decoration)

    response = client.patch(
        "/bookings/assign-decorator",
        json={"bookingId": paid["bookingId"], "decoratorId": decorator_user.id},
        headers=auth_headers("admin@example.com"),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Decorator-assigned"
    assert body["assignedDecorator"]["email"] == "deco@example.com"
    assert body["assignedAt"]
    assert users_repo.get_by_id(decorator_user.id).work_status == "busy"

    queue = client.get("/bookings", headers=auth_headers("admin@example.com"))
    assert queue.json() == []


def test_assign_unknown_decorator_is_404(
    client, auth_headers, admin_user, payment_gateway, decoration, bookings_repo
):
    paid = _paid_booking(client, payment_gateway, decoration)

    response = client.patch(
        "/bookings/assign-decorator",
        json={
            "bookingId": paid["bookingId"],
            "decoratorId": "65f000000000000000000000",
        },
        headers=auth_headers("admin@example.com"),
    )

    assert response.status_code == 404
    assert bookings_repo.get(paid["bookingId"]).status == "pending"


# ---------------------------------------------------------------------------
# Status, cancellation and listings
# ---------------------------------------------------------------------------


def test_update_status(client, auth_headers, payment_gateway, decoration):
    paid = _paid_booking(client, payment_gateway, decoration)
    headers = auth_headers("deco@example.com")

    done = client.patch(
        f"/bookings/{paid['bookingId']}/status",
        json={"status": "completed"},
        headers=headers,
    )
    bad = client.patch(
        f"/bookings/{paid['bookingId']}/status",
        json={"status": "teleported"},
        headers=headers,
    )

    assert done.status_code == 200
    assert done.json()["status"] == "completed"
    assert bad.status_code == 400


def test_cancel_by_transaction_id(client, auth_headers, payment_gateway, decoration):
    paid = _paid_booking(client, payment_gateway, decoration)

    response = client.patch(
        f"/bookings/cancel/{paid['transactionId']}",
        headers=auth_headers("alice@example.com"),
    )

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"
    assert response.json()["cancelledAt"]


def test_cancel_unknown_transaction_is_404(client, auth_headers):
    response = client.patch(
        "/bookings/cancel/pi_missing", headers=auth_headers("alice@example.com")
    )

    assert response.status_code == 404


def test_my_bookings_only_lists_caller(
    client, auth_headers, payment_gateway, decoration
):
    _paid_booking(client, payment_gateway, decoration)

    mine = client.get("/my-bookins", headers=auth_headers("alice@example.com"))
    theirs = client.get("/my-bookins", headers=auth_headers("bob@example.com"))

    assert len(mine.json()) == 1
    assert mine.json()[0]["payment_status"] == "paid"
    assert theirs.json() == []


def test_decorator_task_lists(
    client, auth_headers, admin_user, decorator_user, payment_gateway, decoration
):
    paid = _paid_booking(client, payment_gateway, decoration)
    client.patch(
        "/bookings/assign-decorator",
        json={"bookingId": paid["bookingId"], "decoratorId": decorator_user.id},
        headers=auth_headers("admin@example.com"),
    )
    headers = auth_headers("deco@example.com")

    tasks = client.get(
        "/assigned-task", params={"email": "deco@example.com"}, headers=headers
    )
    managed = client.get(
        "/manage-booking", params={"status": "completed"}, headers=headers
    )
    missing_email = client.get("/assigned-task", headers=headers)

    assert [t["_id"] for t in tasks.json()] == [paid["bookingId"]]
    assert managed.json() == []
    assert missing_email.status_code == 400
