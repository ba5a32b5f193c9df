"""
Vehicles API Routes (Admin)

Endpoints for fleet management:
- GET / - List all vehicles
- POST / - Create vehicle
- PUT /{vehicle_id} - Update vehicle
- DELETE /{vehicle_id}?confirm=true - Delete vehicle
- POST /{vehicle_id}/toggle-availability - Flip is_available
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List

from app.adapters.store_adapter_interface import StoreError
from app.models.vehicle import Vehicle, AVAILABLE_FEATURES
from app.schemas.vehicle import VehicleFormSchema
from app.services.catalog_service import CatalogService, get_catalog_service
from app.services.fleet_service import (
    DeletionNotConfirmedError,
    FleetService,
    VehicleMissingError,
    get_fleet_service,
)

router = APIRouter()


def _store_failure(e: StoreError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


def _not_found(e: VehicleMissingError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Vehicle with ID {e.vehicle_id} not found"
    )


@router.get(
    "/",
    response_model=List[Vehicle],
    summary="List vehicles",
    description="All vehicles, newest first. Store errors are reported, never replaced with fallback data."
)
async def list_vehicles(service: CatalogService = Depends(get_catalog_service)):
    try:
        return await service.get_admin_catalog()
    except StoreError as e:
        raise _store_failure(e)


@router.get(
    "/features",
    response_model=List[str],
    summary="Selectable features"
)
async def list_features():
    return AVAILABLE_FEATURES


@router.post(
    "/",
    response_model=Vehicle,
    status_code=status.HTTP_201_CREATED,
    summary="Create vehicle"
)
async def create_vehicle(
    form: VehicleFormSchema,
    service: FleetService = Depends(get_fleet_service)
):
    try:
        return await service.save_vehicle(form)
    except StoreError as e:
        raise _store_failure(e)


@router.put(
    "/{vehicle_id}",
    response_model=Vehicle,
    summary="Update vehicle"
)
async def update_vehicle(
    vehicle_id: str,
    form: VehicleFormSchema,
    service: FleetService = Depends(get_fleet_service)
):
    try:
        return await service.save_vehicle(form, vehicle_id=vehicle_id)
    except VehicleMissingError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _store_failure(e)


@router.delete(
    "/{vehicle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete vehicle",
    description="Requires `confirm=true`. Bookings referencing the vehicle are left as they are."
)
async def delete_vehicle(
    vehicle_id: str,
    confirm: bool = Query(False, description="Operator confirmed the deletion"),
    service: FleetService = Depends(get_fleet_service)
):
    try:
        await service.delete_vehicle(vehicle_id, confirmed=confirm)
    except DeletionNotConfirmedError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    except VehicleMissingError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _store_failure(e)


@router.post(
    "/{vehicle_id}/toggle-availability",
    response_model=List[Vehicle],
    summary="Toggle availability",
    description="Flip is_available and return the re-fetched fleet."
)
async def toggle_availability(
    vehicle_id: str,
    service: FleetService = Depends(get_fleet_service)
):
    try:
        return await service.toggle_availability(vehicle_id)
    except VehicleMissingError as e:
        raise _not_found(e)
    except StoreError as e:
        raise _store_failure(e)
