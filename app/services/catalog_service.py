"""
Catalog Service

Reads the vehicle catalog for the public landing page and the admin screen.

The landing page is never empty: when the store has no available vehicles,
or cannot be read, three showcase vehicles are returned instead. The result
says which of these happened; the showcase list is never written back.
"""
import logging
from typing import List

from fastapi import Depends
from pydantic import ValidationError

from app.adapters.store_adapter_interface import DataStoreInterface, StoreError
from app.models.vehicle import Vehicle
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.vehicle import CatalogResponseSchema
from app.services.store_service import get_store

logger = logging.getLogger(__name__)


DEFAULT_VEHICLES = [
    {
        "id": "1",
        "name": "Mercedes S-Class",
        "description": "The pinnacle of luxury and comfort for your Swiss journeys.",
        "price_per_hour": 120,
        "image_url": "https://images.unsplash.com/photo-1563720223185-11003d516935?q=80&w=2070&auto=format&fit=crop",
        "images": [
            "https://images.unsplash.com/photo-1563720223185-11003d516935?q=80&w=2070&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1503376780353-7e6692767b70?q=80&w=2070&auto=format&fit=crop",
        ],
        "features": ["Premium Audio", "AC", "Automatic"],
        "is_available": True,
    },
    {
        "id": "2",
        "name": "BMW 7 Series",
        "description": "Dynamic performance combined with executive-level luxury.",
        "price_per_hour": 110,
        "image_url": "https://images.unsplash.com/photo-1555215695-3004980ad54e?q=80&w=2070&auto=format&fit=crop",
        "images": [
            "https://images.unsplash.com/photo-1555215695-3004980ad54e?q=80&w=2070&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1523983388277-336a66bf9bcd?q=80&w=2070&auto=format&fit=crop",
        ],
        "features": ["GPS Navigation", "AC", "Automatic"],
        "is_available": True,
    },
    {
        "id": "3",
        "name": "Audi A8",
        "description": "Advanced technology and sophisticated design for every occasion.",
        "price_per_hour": 105,
        "image_url": "https://images.unsplash.com/photo-1606152421802-db97b9c7a11b?q=80&w=1974&auto=format&fit=crop",
        "images": [
            "https://images.unsplash.com/photo-1606152421802-db97b9c7a11b?q=80&w=1974&auto=format&fit=crop",
            "https://images.unsplash.com/photo-1603584173870-7f23fdae1b7a?q=80&w=2069&auto=format&fit=crop",
        ],
        "features": ["Premium Audio", "GPS Navigation", "Automatic"],
        "is_available": True,
    },
]


def default_vehicles() -> List[Vehicle]:
    """Fresh copies of the showcase vehicles."""
    return [Vehicle(**data) for data in DEFAULT_VEHICLES]


class CatalogService:
    """Service for vehicle catalog reads"""

    def __init__(self, store: DataStoreInterface):
        self.repository = VehicleRepository(store)

    async def get_public_catalog(self) -> CatalogResponseSchema:
        """Available vehicles, or the showcase list when there are none."""
        try:
            vehicles = await self.repository.list_available()
        except (StoreError, ValidationError) as e:
            logger.warning(f"Catalog read failed, serving fallback vehicles: {e}")
            return CatalogResponseSchema(
                vehicles=default_vehicles(),
                source="fallback",
                storeError=str(e)
            )

        if not vehicles:
            logger.info("No available vehicles in store, serving fallback vehicles")
            return CatalogResponseSchema(vehicles=default_vehicles(), source="fallback")

        return CatalogResponseSchema(vehicles=vehicles, source="store")

    async def get_admin_catalog(self) -> List[Vehicle]:
        """All vehicles, newest first. Store errors propagate."""
        return await self.repository.list_all()


def get_catalog_service(store: DataStoreInterface = Depends(get_store)) -> CatalogService:
    """
    Factory function to create CatalogService instance.
    """
    return CatalogService(store)
