"""
Fleet Service - Admin Vehicle Management

Create, edit, delete and availability toggling for vehicles, plus image
upload to the image host.

- Saving writes an insert (new vehicle) or an update keyed by id, never both.
- Deleting needs explicit confirmation and does not touch bookings.
- Images are uploaded one file at a time; refused files are only counted.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from fastapi import Depends

from app.adapters.image_host_adapter_interface import ImageHostAdapterInterface
from app.adapters.store_adapter_interface import DataStoreInterface, StoreError
from app.models.vehicle import Vehicle
from app.repositories.booking_repository import BookingRepository
from app.repositories.vehicle_repository import VehicleRepository
from app.schemas.vehicle import ImageUploadResponseSchema, VehicleFormSchema
from app.services.image_host_service import get_image_host
from app.services.store_service import get_store

logger = logging.getLogger(__name__)


class DeletionNotConfirmedError(Exception):
    """Delete requested without operator confirmation"""
    pass


class VehicleMissingError(Exception):
    """Vehicle id does not exist"""
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found")


@dataclass
class ImageFile:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class FleetService:
    """Service for admin fleet operations"""

    def __init__(self, store: DataStoreInterface, image_host: Optional[ImageHostAdapterInterface] = None):
        self.vehicles = VehicleRepository(store)
        self.bookings = BookingRepository(store)
        self.image_host = image_host

    async def save_vehicle(self, form: VehicleFormSchema, vehicle_id: Optional[str] = None) -> Vehicle:
        """
        Insert a new vehicle, or update `vehicle_id` when given.

        Raises:
            VehicleMissingError: If vehicle_id is given but unknown
        """
        values = form.to_row()

        if vehicle_id:
            vehicle = await self.vehicles.update(vehicle_id, values)
            if not vehicle:
                raise VehicleMissingError(vehicle_id)
            logger.info(f"Vehicle updated: {vehicle_id}")
            return vehicle

        return await self.vehicles.create(values)

    async def delete_vehicle(self, vehicle_id: str, confirmed: bool) -> None:
        """
        Delete a vehicle after confirmation.

        Raises:
            DeletionNotConfirmedError: If confirmed is False (store untouched)
            VehicleMissingError: If nothing was deleted
        """
        if not confirmed:
            raise DeletionNotConfirmedError("Deleting a vehicle requires confirmation")

        # TODO: block or cascade once bookings carry a foreign key to vehicles
        # The count is informational only; a failed read must not block the delete
        try:
            referencing = await self.bookings.count_for_vehicle(vehicle_id)
        except StoreError as e:
            logger.warning(f"Could not count bookings for vehicle {vehicle_id}: {e}")
        else:
            if referencing:
                logger.warning(f"Deleting vehicle {vehicle_id} referenced by {referencing} booking(s)")

        if not await self.vehicles.delete(vehicle_id):
            raise VehicleMissingError(vehicle_id)
        logger.info(f"Vehicle deleted: {vehicle_id}")

    async def toggle_availability(self, vehicle_id: str) -> List[Vehicle]:
        """
        Flip is_available and return the re-fetched fleet.

        Raises:
            VehicleMissingError: If vehicle_id is unknown
        """
        vehicle = await self.vehicles.get_by_id(vehicle_id)
        if not vehicle:
            raise VehicleMissingError(vehicle_id)

        await self.vehicles.update(vehicle_id, {"is_available": not vehicle.is_available})
        return await self.vehicles.list_all()

    async def upload_images(self, files: List[ImageFile]) -> ImageUploadResponseSchema:
        """
        Upload files sequentially. Host refusals are counted, not retried.

        Raises:
            ImageHostError: If the host cannot be reached
        """
        urls = []
        failed = 0

        for image in files:
            result = await self.image_host.upload_image(image.filename, image.content, image.content_type)
            if result.success and result.url:
                urls.append(result.url)
            else:
                failed += 1

        logger.info(f"Image upload: {len(urls)} uploaded, {failed} failed")
        return ImageUploadResponseSchema(urls=urls, uploaded=len(urls), failed=failed)


def get_fleet_service(
    store: DataStoreInterface = Depends(get_store),
    image_host: ImageHostAdapterInterface = Depends(get_image_host)
) -> FleetService:
    """
    Factory function to create FleetService instance.
    """
    return FleetService(store, image_host)
