import asyncio
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.adapters.auth_mock_adapter import AuthMockAdapter
from app.adapters.image_host_adapter_interface import ImageHostError
from app.adapters.image_mock_adapter import ImageMockAdapter
from app.adapters.store_adapter_interface import Row, StoreUnavailableError
from app.adapters.store_mock_adapter import StoreMockAdapter
from app.main import app
from app.services.auth_service import get_auth
from app.services.image_host_service import get_image_host
from app.services.store_service import get_store

ADMIN_EMAIL = "admin@optimrental.ch"
ADMIN_PASSWORD = "optimrental-test-pass"


class FailingStoreAdapter(StoreMockAdapter):
    """Mock store whose chosen operations fail as if Supabase were down."""

    def __init__(self, fail_on=("select", "insert", "update", "delete"), tables=None, fail_tables=None):
        super().__init__(tables)
        self.fail_on = set(fail_on)
        self.fail_tables = set(fail_tables) if fail_tables else None

    def _maybe_fail(self, operation: str, table: str) -> None:
        if self.fail_tables is not None and table not in self.fail_tables:
            return
        if operation in self.fail_on:
            raise StoreUnavailableError("Supabase not available")

    async def select(self, table, filters=None, columns="*", order_by=None, descending=False) -> List[Row]:
        self._maybe_fail("select", table)
        return await super().select(table, filters, columns, order_by, descending)

    async def insert(self, table, rows):
        self._maybe_fail("insert", table)
        return await super().insert(table, rows)

    async def update(self, table, values, filters):
        self._maybe_fail("update", table)
        return await super().update(table, values, filters)

    async def delete(self, table, filters):
        self._maybe_fail("delete", table)
        return await super().delete(table, filters)


class UnreachableImageHost(ImageMockAdapter):
    async def upload_image(self, filename, content, content_type="application/octet-stream"):
        raise ImageHostError("Image host not available")


def vehicle_row(**overrides: Any) -> Dict[str, Any]:
    row = {
        "id": "veh-s-class",
        "name": "Mercedes S-Class",
        "description": "The pinnacle of luxury.",
        "price_per_hour": 120,
        "image_url": "https://i.ibb.co/a/s-class.jpg",
        "images": ["https://i.ibb.co/a/s-class.jpg", "https://i.ibb.co/b/s-class-2.jpg"],
        "is_available": True,
        "features": ["Premium Audio", "AC", "Automatic"],
        "created_at": "2026-10-01T09:00:00",
    }
    row.update(overrides)
    return row


def booking_row(**overrides: Any) -> Dict[str, Any]:
    row = {
        "id": "bk-1",
        "vehicle_id": "veh-s-class",
        "vehicle_name": "Mercedes S-Class",
        "customer_name": "John Doe",
        "customer_email": "john@example.com",
        "licence_no": "B1234567",
        "nationality": "Switzerland",
        "mobile_no": "+41 00 000 00 00",
        "booking_date": "2026-11-02",
        "hours": 2,
        "total_price": 240,
        "status": "pending",
        "created_at": "2026-10-10T12:00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fleet_rows() -> List[Dict[str, Any]]:
    return [
        vehicle_row(),
        vehicle_row(
            id="veh-bmw-7",
            name="BMW 7 Series",
            price_per_hour=110,
            features=["GPS Navigation", "AC"],
            created_at="2026-10-03T09:00:00",
        ),
        vehicle_row(
            id="veh-audi-a8",
            name="Audi A8",
            price_per_hour=99.95,
            is_available=False,
            features=[],
            created_at="2026-10-02T09:00:00",
        ),
    ]


@pytest.fixture
def store(fleet_rows) -> StoreMockAdapter:
    return StoreMockAdapter({"vehicles": fleet_rows, "bookings": []})


@pytest.fixture
def empty_store() -> StoreMockAdapter:
    return StoreMockAdapter()


@pytest.fixture
def auth() -> AuthMockAdapter:
    adapter = AuthMockAdapter()
    asyncio.run(adapter.create_user(
        ADMIN_EMAIL, ADMIN_PASSWORD, email_confirm=True, user_metadata={"role": "admin"}
    ))
    return adapter


@pytest.fixture
def image_host() -> ImageMockAdapter:
    return ImageMockAdapter()


def make_client(store, auth, image_host):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_auth] = lambda: auth
    app.dependency_overrides[get_image_host] = lambda: image_host
    return TestClient(app)


@pytest.fixture
def client_factory(auth, image_host):
    """Build a TestClient around any store (and optionally another image host)."""
    def factory(store, host: Optional[ImageMockAdapter] = None) -> TestClient:
        return make_client(store, auth, host or image_host)

    yield factory
    app.dependency_overrides.clear()


@pytest.fixture
def client(store, client_factory) -> TestClient:
    return client_factory(store)


@pytest.fixture
def admin_headers(client) -> Dict[str, str]:
    response = client.post(
        "/api/v1/auth/login",
        data={"username": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
