from pydantic import BaseModel, Field


class DashboardStatsSchema(BaseModel):
    """Admin dashboard cards"""
    totalVehicles: int = Field(..., description="All vehicles, available or not")
    totalBookings: int = Field(..., description="All bookings")
    pendingBookings: int = Field(..., description="Bookings with status 'pending'")
    totalRevenue: float = Field(..., description="Sum of total_price over 'confirmed' bookings")
    currency: str = Field("CHF", description="Currency of totalRevenue")

    class Config:
        json_schema_extra = {
            "example": {
                "totalVehicles": 3,
                "totalBookings": 12,
                "pendingBookings": 4,
                "totalRevenue": 2310.0,
                "currency": "CHF"
            }
        }
