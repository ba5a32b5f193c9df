"""
Dashboard Service

Four display metrics from two unfiltered reads, recomputed on every call.
"""
from fastapi import Depends

from app.adapters.store_adapter_interface import DataStoreInterface
from app.models.booking import BookingStatus
from app.repositories.booking_repository import BookingRepository
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.dashboard import DashboardStatsSchema
from app.services.calculation_service import calculation_service
from app.services.store_service import get_store


class DashboardService:
    """Service for admin dashboard statistics"""

    def __init__(self, store: DataStoreInterface):
        self.vehicles = VehicleRepository(store)
        self.bookings = BookingRepository(store)

    async def get_stats(self) -> DashboardStatsSchema:
        total_vehicles = await self.vehicles.count()
        bookings = await self.bookings.list_totals()

        pending = sum(1 for b in bookings if b.get("status") == BookingStatus.PENDING.value)
        revenue = calculation_service.confirmed_revenue(bookings)

        return DashboardStatsSchema(
            totalVehicles=total_vehicles,
            totalBookings=len(bookings),
            pendingBookings=pending,
            totalRevenue=float(revenue),
            currency=calculation_service.currency
        )


def get_dashboard_service(store: DataStoreInterface = Depends(get_store)) -> DashboardService:
    return DashboardService(store)
