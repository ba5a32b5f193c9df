"""
Booking Service - Business Logic Layer

Persists booking requests from the public form and serves the admin
booking list. The submitted total is never trusted: it is recomputed from
the vehicle's stored hourly rate and a disagreeing request is rejected.
"""
import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import Depends

from app.adapters.store_adapter_interface import DataStoreInterface
from app.models.booking import Booking, BookingStatus
from app.repositories.booking_repository import BookingRepository
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.booking import BookingCreateSchema
from app.services.calculation_service import calculation_service
from app.services.store_service import get_store

logger = logging.getLogger(__name__)


class VehicleNotFoundError(Exception):
    """Booking references a vehicle that does not exist"""
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found")


class PriceMismatchError(Exception):
    """Submitted total disagrees with the vehicle's rate"""
    def __init__(self, submitted: Decimal, expected: Decimal):
        self.submitted = submitted
        self.expected = expected
        super().__init__(
            f"total_price {submitted} does not match price_per_hour x hours ({expected})"
        )


class BookingService:
    """Service for booking business logic (Async)"""

    def __init__(self, store: DataStoreInterface):
        self.repository = BookingRepository(store)
        self.vehicles = VehicleRepository(store)

    async def create_booking(self, booking_data: BookingCreateSchema) -> Booking:
        """
        Verify and store a booking request.

        Raises:
            VehicleNotFoundError: If vehicle_id is unknown
            PriceMismatchError: If total_price != price_per_hour * hours
            StoreError: If the store read or write fails
        """
        vehicle = await self.vehicles.get_by_id(booking_data.vehicle_id)
        if not vehicle:
            raise VehicleNotFoundError(booking_data.vehicle_id)

        expected = calculation_service.calculate_total(vehicle.price_per_hour, booking_data.hours)
        if not calculation_service.totals_match(booking_data.total_price, expected):
            logger.warning(
                f"Rejected booking for {vehicle.id}: submitted {booking_data.total_price}, expected {expected}"
            )
            raise PriceMismatchError(
                calculation_service.round_amount(booking_data.total_price),
                calculation_service.round_amount(expected)
            )

        values = booking_data.model_dump(mode="json")
        values.update({
            "total_price": float(calculation_service.round_amount(expected)),
            # Snapshot the stored name rather than the client's copy
            "vehicle_name": vehicle.name,
            "status": BookingStatus.PENDING.value,
        })
        return await self.repository.create(values)

    async def list_bookings(self, status: Optional[BookingStatus] = None) -> List[Booking]:
        """All bookings, newest first, optionally filtered by status."""
        return await self.repository.find_all(status)

    async def set_status(self, booking_id: str, status: BookingStatus) -> Optional[Booking]:
        """Move a booking to a new status; None if it does not exist."""
        return await self.repository.update_status(booking_id, status)


def get_booking_service(store: DataStoreInterface = Depends(get_store)) -> BookingService:
    """
    Factory function to create BookingService instance.
    """
    return BookingService(store)
