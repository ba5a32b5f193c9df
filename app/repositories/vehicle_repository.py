from typing import Any, Dict, List, Optional
import logging

from app.adapters.store_adapter_interface import DataStoreInterface
from app.models.vehicle import Vehicle

# Logger setup
logger = logging.getLogger(__name__)

TABLE = "vehicles"


class VehicleRepository:
    """
    Repository for `vehicles` table operations.
    Store errors propagate; callers decide how to surface them.
    """

    def __init__(self, store: DataStoreInterface):
        self.store = store

    async def list_all(self) -> List[Vehicle]:
        """All vehicles, newest first (admin view)."""
        rows = await self.store.select(TABLE, order_by="created_at", descending=True)
        return [Vehicle(**row) for row in rows]

    async def list_available(self) -> List[Vehicle]:
        """Vehicles flagged as available (public view)."""
        rows = await self.store.select(TABLE, filters={"is_available": True})
        return [Vehicle(**row) for row in rows]

    async def get_by_id(self, vehicle_id: str) -> Optional[Vehicle]:
        rows = await self.store.select(TABLE, filters={"id": vehicle_id})
        if not rows:
            return None
        return Vehicle(**rows[0])

    async def count(self) -> int:
        rows = await self.store.select(TABLE, columns="id")
        return len(rows)

    async def create(self, values: Dict[str, Any]) -> Vehicle:
        rows = await self.store.insert(TABLE, [values])
        vehicle = Vehicle(**rows[0])
        logger.info(f"Vehicle created: {vehicle.id} ({vehicle.name})")
        return vehicle

    async def update(self, vehicle_id: str, values: Dict[str, Any]) -> Optional[Vehicle]:
        rows = await self.store.update(TABLE, values, filters={"id": vehicle_id})
        if not rows:
            return None
        return Vehicle(**rows[0])

    async def delete(self, vehicle_id: str) -> bool:
        rows = await self.store.delete(TABLE, filters={"id": vehicle_id})
        return bool(rows)
