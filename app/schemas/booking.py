from pydantic import BaseModel, Field, field_validator
from datetime import date
from typing import Optional

from app.core.config import settings
from app.models.booking import BookingStatus, Nationality


# ============================================================================
# Booking Schemas (matching the public booking form payload)
# ============================================================================

class BookingCreateSchema(BaseModel):
    """Body of POST /api/bookings"""
    vehicle_id: str = Field(..., min_length=1, description="Selected vehicle ID")
    customer_name: str = Field("", max_length=200, description="Full name")
    customer_email: str = Field(..., description="Customer email address")
    licence_no: str = Field("", max_length=100, description="Driving licence number")
    nationality: Nationality = Field(Nationality.SWITZERLAND, description="Nationality")
    mobile_no: str = Field("", max_length=50, description="Mobile number")
    booking_date: date = Field(..., description="Rental day (YYYY-MM-DD)")
    hours: int = Field(..., ge=1, le=settings.MAX_BOOKING_HOURS, description="Duration in hours")
    total_price: float = Field(..., ge=0, description="price_per_hour * hours as shown to the customer")
    vehicle_name: Optional[str] = Field(None, description="Vehicle name shown to the customer")

    @field_validator("customer_email")
    @classmethod
    def email_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("customer_email is required")
        return value

    class Config:
        json_schema_extra = {
            "example": {
                "vehicle_id": "2f6c1b7e-4c1d-4d7a-9a55-3e0f1c2b8d11",
                "customer_name": "John Doe",
                "customer_email": "name@example.com",
                "licence_no": "B1234567",
                "nationality": "Switzerland",
                "mobile_no": "+41 00 000 00 00",
                "booking_date": "2026-11-02",
                "hours": 3,
                "total_price": 360,
                "vehicle_name": "Mercedes S-Class"
            }
        }


class BookingStatusUpdateSchema(BaseModel):
    """Admin status change"""
    status: BookingStatus
