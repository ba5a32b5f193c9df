from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional
import enum


class BookingStatus(str, enum.Enum):
    """Booking status enumeration."""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Nationality(str, enum.Enum):
    """Nationalities offered by the booking form."""
    SWITZERLAND = "Switzerland"
    GERMANY = "Germany"
    FRANCE = "France"
    ITALY = "Italy"
    AUSTRIA = "Austria"
    UNITED_KINGDOM = "United Kingdom"
    USA = "USA"
    CANADA = "Canada"
    OTHER = "Other"


class Booking(BaseModel):
    """
    Booking model.
    Mirrors a row of the hosted `bookings` table.
    """
    id: str
    vehicle_id: str
    vehicle_name: Optional[str] = None

    customer_name: Optional[str] = None
    customer_email: str
    licence_no: Optional[str] = None
    nationality: Optional[str] = Nationality.SWITZERLAND.value
    mobile_no: Optional[str] = None

    booking_date: date
    hours: int
    total_price: float = Field(0.0, ge=0)

    # Free-form in the store; the dashboard compares it case-sensitively
    status: str = BookingStatus.PENDING.value
    created_at: Optional[datetime] = None