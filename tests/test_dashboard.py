from conftest import FailingStoreAdapter, booking_row

DASHBOARD = "/api/v1/admin/dashboard/"


def test_dashboard_stats(client, store, admin_headers):
    store.tables["bookings"] = [
        booking_row(id="bk-1", status="confirmed", total_price=240),
        booking_row(id="bk-2", status="confirmed", total_price=99.95),
        booking_row(id="bk-3", status="Confirmed", total_price=1000),
        booking_row(id="bk-4", status="pending", total_price=360),
        booking_row(id="bk-5", status="pending", total_price=120),
        booking_row(id="bk-6", status="cancelled", total_price=110),
    ]

    response = client.get(DASHBOARD, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {
        "totalVehicles": 3,
        "totalBookings": 6,
        "pendingBookings": 2,
        "totalRevenue": 339.95,
        "currency": "CHF",
    }


def test_dashboard_reads_both_tables_every_time(client, store, admin_headers):
    client.get(DASHBOARD, headers=admin_headers)
    client.get(DASHBOARD, headers=admin_headers)

    reads = [(op, table) for op, table, _ in store.calls]
    assert reads == [
        ("select", "vehicles"), ("select", "bookings"),
        ("select", "vehicles"), ("select", "bookings"),
    ]


def test_dashboard_on_empty_store(client_factory, empty_store, admin_headers):
    client = client_factory(empty_store)

    response = client.get(DASHBOARD, headers=admin_headers)

    assert response.json() == {
        "totalVehicles": 0,
        "totalBookings": 0,
        "pendingBookings": 0,
        "totalRevenue": 0.0,
        "currency": "CHF",
    }


def test_dashboard_store_failure(client_factory, admin_headers):
    client = client_factory(FailingStoreAdapter())

    assert client.get(DASHBOARD, headers=admin_headers).status_code == 502


def test_dashboard_requires_admin(client):
    assert client.get(DASHBOARD).status_code == 401
