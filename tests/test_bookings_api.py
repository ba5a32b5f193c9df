import pytest

from conftest import FailingStoreAdapter, booking_row, vehicle_row


def booking_payload(**overrides):
    payload = {
        "vehicle_id": "veh-s-class",
        "customer_name": "John Doe",
        "customer_email": "john@example.com",
        "licence_no": "B1234567",
        "nationality": "Germany",
        "mobile_no": "+41 79 000 00 00",
        "booking_date": "2026-11-02",
        "hours": 3,
        "total_price": 360,
        "vehicle_name": "Mercedes S-Class",
    }
    payload.update(overrides)
    return payload


def test_create_booking_stores_pending_request(client, store):
    response = client.post("/api/bookings", json=booking_payload())

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["total_price"] == 360
    assert body["booking_date"] == "2026-11-02"
    assert body["nationality"] == "Germany"
    assert body["id"]

    stored = store.tables["bookings"]
    assert len(stored) == 1
    assert stored[0]["vehicle_id"] == "veh-s-class"
    assert stored[0]["customer_email"] == "john@example.com"
    assert [op for op, table, _ in store.calls if table == "bookings"] == ["insert"]


def test_vehicle_name_is_taken_from_the_store(client, store):
    response = client.post("/api/bookings", json=booking_payload(vehicle_name="Something Else"))

    assert response.status_code == 201
    assert store.tables["bookings"][0]["vehicle_name"] == "Mercedes S-Class"


def test_nationality_defaults_to_switzerland(client):
    payload = booking_payload()
    del payload["nationality"]

    response = client.post("/api/bookings", json=payload)

    assert response.status_code == 201
    assert response.json()["nationality"] == "Switzerland"


def test_decimal_rate_total_is_accepted(client):
    # Audi A8 at 99.95/h, the form sends the float product
    response = client.post(
        "/api/bookings",
        json=booking_payload(vehicle_id="veh-audi-a8", hours=3, total_price=99.95 * 3),
    )

    assert response.status_code == 201
    assert response.json()["total_price"] == 299.85


def test_tampered_total_is_rejected(client, store):
    response = client.post("/api/bookings", json=booking_payload(total_price=1))

    assert response.status_code == 422
    assert "does not match" in response.json()["detail"]
    assert store.tables["bookings"] == []


def test_unknown_vehicle_is_rejected(client, store):
    response = client.post("/api/bookings", json=booking_payload(vehicle_id="nope"))

    assert response.status_code == 404
    assert store.tables["bookings"] == []


@pytest.mark.parametrize("hours", [0, 25])
def test_hours_are_bounded(client, hours):
    response = client.post("/api/bookings", json=booking_payload(hours=hours, total_price=120 * hours))

    assert response.status_code == 422


@pytest.mark.parametrize("email", ["", "   "])
def test_email_is_required(client, email):
    response = client.post("/api/bookings", json=booking_payload(customer_email=email))

    assert response.status_code == 422


def test_missing_email_field_is_rejected(client):
    payload = booking_payload()
    del payload["customer_email"]

    assert client.post("/api/bookings", json=payload).status_code == 422


def test_unknown_nationality_is_rejected(client):
    response = client.post("/api/bookings", json=booking_payload(nationality="Atlantis"))

    assert response.status_code == 422


def test_bad_date_is_rejected(client):
    response = client.post("/api/bookings", json=booking_payload(booking_date="02.11.2026"))

    assert response.status_code == 422


def test_store_failure_on_write_is_reported(client_factory):
    store = FailingStoreAdapter(fail_on=["insert"], tables={"vehicles": [vehicle_row()]})
    client = client_factory(store)

    response = client.post("/api/bookings", json=booking_payload())

    assert response.status_code == 502
    assert response.json()["detail"] == "Supabase not available"


def test_repeated_submission_creates_two_bookings(client, store):
    # No idempotency key: each accepted POST is a new booking
    client.post("/api/bookings", json=booking_payload())
    client.post("/api/bookings", json=booking_payload())

    assert len(store.tables["bookings"]) == 2


# ---------------------------------------------------------------------------
# Admin booking viewer
# ---------------------------------------------------------------------------

@pytest.fixture
def booked_store(store):
    store.tables["bookings"] = [
        booking_row(id="bk-old", status="confirmed", created_at="2026-10-01T08:00:00"),
        booking_row(id="bk-new", status="pending", created_at="2026-10-12T08:00:00"),
        booking_row(id="bk-mid", status="cancelled", created_at="2026-10-05T08:00:00"),
    ]
    return store


def test_admin_bookings_need_a_token(client):
    assert client.get("/api/v1/admin/bookings/").status_code == 401


def test_admin_bookings_newest_first(client, booked_store, admin_headers):
    response = client.get("/api/v1/admin/bookings/", headers=admin_headers)

    assert response.status_code == 200
    assert [b["id"] for b in response.json()] == ["bk-new", "bk-mid", "bk-old"]


def test_admin_bookings_status_filter(client, booked_store, admin_headers):
    response = client.get("/api/v1/admin/bookings/?status=confirmed", headers=admin_headers)

    assert [b["id"] for b in response.json()] == ["bk-old"]


def test_admin_confirms_booking(client, booked_store, admin_headers):
    response = client.patch(
        "/api/v1/admin/bookings/bk-new/status",
        json={"status": "confirmed"},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "confirmed"
    stored = {b["id"]: b["status"] for b in booked_store.tables["bookings"]}
    assert stored == {"bk-old": "confirmed", "bk-new": "confirmed", "bk-mid": "cancelled"}


def test_status_change_for_unknown_booking(client, booked_store, admin_headers):
    response = client.patch(
        "/api/v1/admin/bookings/missing/status",
        json={"status": "confirmed"},
        headers=admin_headers,
    )

    assert response.status_code == 404


def test_status_must_be_known(client, booked_store, admin_headers):
    response = client.patch(
        "/api/v1/admin/bookings/bk-new/status",
        json={"status": "Confirmed"},
        headers=admin_headers,
    )

    assert response.status_code == 422
