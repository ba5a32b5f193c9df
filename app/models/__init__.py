"""
Data models package.
Rows of the hosted tables and users of the hosted auth service.
"""
from app.models.user import AuthUser, UserRole
from app.models.vehicle import Vehicle, VehicleFeature, AVAILABLE_FEATURES
from app.models.booking import Booking, BookingStatus, Nationality

__all__ = [
    "AuthUser",
    "UserRole",
    "Vehicle",
    "VehicleFeature",
    "AVAILABLE_FEATURES",
    "Booking",
    "BookingStatus",
    "Nationality",
]
