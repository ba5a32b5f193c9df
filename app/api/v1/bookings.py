"""
Booking API Routes

Public:
- POST /api/bookings - Create a booking request from the booking form

Admin:
- GET /api/v1/admin/bookings - List bookings
- PATCH /api/v1/admin/bookings/{booking_id}/status - Change booking status
"""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from app.adapters.store_adapter_interface import StoreError
from app.models.booking import Booking, BookingStatus
from app.schemas.booking import BookingCreateSchema, BookingStatusUpdateSchema
from app.services.booking_service import (
    BookingService,
    PriceMismatchError,
    VehicleNotFoundError,
    get_booking_service,
)

router = APIRouter()
admin_router = APIRouter()


@router.post(
    "",
    response_model=Booking,
    status_code=status.HTTP_201_CREATED,
    summary="Create booking",
    description="Store a booking request. The total is re-checked against the vehicle's hourly rate."
)
async def create_booking(
    booking_data: BookingCreateSchema,
    service: BookingService = Depends(get_booking_service)
):
    """
    Create a booking request (status `pending`).

    **Errors:**
    - 404: vehicle does not exist
    - 422: invalid fields, or total_price != price_per_hour × hours
    - 502: the store rejected the write
    """
    try:
        return await service.create_booking(booking_data)
    except VehicleNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except PriceMismatchError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )


@admin_router.get(
    "/",
    response_model=List[Booking],
    summary="List bookings",
    description="All bookings, newest first, with optional status filter."
)
async def list_bookings(
    status_filter: Optional[BookingStatus] = Query(None, alias="status", description="pending, confirmed or cancelled"),
    service: BookingService = Depends(get_booking_service)
):
    try:
        return await service.list_bookings(status_filter)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )


@admin_router.patch(
    "/{booking_id}/status",
    response_model=Booking,
    summary="Change booking status"
)
async def update_booking_status(
    booking_id: str,
    update: BookingStatusUpdateSchema,
    service: BookingService = Depends(get_booking_service)
):
    try:
        booking = await service.set_status(booking_id, update.status)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message
        )

    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Booking with ID {booking_id} not found"
        )

    return booking
