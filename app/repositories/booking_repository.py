from typing import Any, Dict, List, Optional
import logging

from app.adapters.store_adapter_interface import DataStoreInterface, Row
from app.models.booking import Booking, BookingStatus

# Logger setup
logger = logging.getLogger(__name__)

TABLE = "bookings"


class BookingRepository:
    """
    Repository for `bookings` table operations.
    """

    def __init__(self, store: DataStoreInterface):
        self.store = store

    async def create(self, values: Dict[str, Any]) -> Booking:
        rows = await self.store.insert(TABLE, [values])
        booking = Booking(**rows[0])
        logger.info(f"Booking created: {booking.id} for vehicle {booking.vehicle_id}")
        return booking

    async def find_all(self, status: Optional[BookingStatus] = None) -> List[Booking]:
        filters = {"status": status.value} if status else None
        rows = await self.store.select(
            TABLE,
            filters=filters,
            order_by="created_at",
            descending=True
        )
        return [Booking(**row) for row in rows]

    async def list_totals(self) -> List[Row]:
        """Status and total_price of every booking, for the dashboard."""
        return await self.store.select(TABLE, columns="status,total_price")

    async def count_for_vehicle(self, vehicle_id: str) -> int:
        rows = await self.store.select(TABLE, filters={"vehicle_id": vehicle_id}, columns="id")
        return len(rows)

    async def update_status(self, booking_id: str, status: BookingStatus) -> Optional[Booking]:
        rows = await self.store.update(
            TABLE,
            {"status": status.value},
            filters={"id": booking_id}
        )
        if not rows:
            return None
        logger.info(f"Booking {booking_id} -> {status.value}")
        return Booking(**rows[0])
