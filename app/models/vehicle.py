from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List, Optional
import enum


class VehicleFeature(str, enum.Enum):
    """Feature labels an admin can attach to a vehicle."""
    PREMIUM_AUDIO = "Premium Audio"
    GPS_NAVIGATION = "GPS Navigation"
    AC = "AC"
    AUTOMATIC = "Automatic"


AVAILABLE_FEATURES = [feature.value for feature in VehicleFeature]


class Vehicle(BaseModel):
    """
    Vehicle model.
    Mirrors a row of the hosted `vehicles` table.
    """
    id: str
    name: str
    description: Optional[str] = ""
    price_per_hour: float = Field(0.0, ge=0)
    image_url: Optional[str] = ""
    images: List[str] = []
    is_available: bool = True
    features: List[str] = []
    created_at: Optional[datetime] = None

    @field_validator("images", "features", mode="before")
    @classmethod
    def null_list_as_empty(cls, v):
        # Postgres array columns may hold NULL
        return [] if v is None else v

    @field_validator("description", "image_url", mode="before")
    @classmethod
    def null_text_as_empty(cls, v):
        return "" if v is None else v
