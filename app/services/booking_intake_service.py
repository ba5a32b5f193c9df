"""
Booking Intake Service

State of the public booking form and its single submission to
POST /api/bookings. Mirrors what the customer sees: the selected vehicle,
the running total, notifications, and the redirect scheduled after success.

The form is driven over any httpx.AsyncClient whose base_url points at
the site (tests use the ASGI app directly).
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Sequence

import httpx

from app.core.config import settings
from app.models.booking import Nationality
from app.models.vehicle import Vehicle
from app.services.calculation_service import calculation_service

logger = logging.getLogger(__name__)

BOOKINGS_PATH = "/api/bookings"
MISSING_FIELDS_MESSAGE = "Please fill all fields"
SUCCESS_MESSAGE = "Booking request sent successfully"
ERROR_MESSAGE = "Something went wrong. Please try again."


@dataclass
class Notification:
    level: str  # "success" | "error"
    message: str


class BookingIntakeForm:
    """One customer's booking form"""

    def __init__(
        self,
        vehicles: Sequence[Vehicle],
        client: httpx.AsyncClient,
        today: Optional[date] = None,
        on_redirect: Optional[Callable[[str], None]] = None
    ):
        if not vehicles:
            raise ValueError("Booking form needs at least one vehicle")

        self.vehicles = list(vehicles)
        self.client = client
        self.on_redirect = on_redirect

        self.selected_vehicle: Optional[Vehicle] = None
        self.booking_date: Optional[date] = today or date.today()
        self.hours = 1
        self.customer_name = ""
        self.customer_email = ""
        self.licence_no = ""
        self.nationality = Nationality.SWITZERLAND
        self.mobile_no = ""

        self.is_submitting = False
        self.is_success = False
        self.redirect_to: Optional[str] = None
        self.notifications: List[Notification] = []

    # ------------------------------------------------------------------
    # Field updates
    # ------------------------------------------------------------------

    def select_vehicle(self, vehicle_id: str) -> Vehicle:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                self.selected_vehicle = vehicle
                return vehicle
        raise ValueError(f"Unknown vehicle: {vehicle_id}")

    def set_hours(self, hours: int) -> None:
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise ValueError("Hours must be a whole number")
        if hours < 1 or hours > settings.MAX_BOOKING_HOURS:
            raise ValueError(f"Hours must be between 1 and {settings.MAX_BOOKING_HOURS}")
        self.hours = hours

    # ------------------------------------------------------------------
    # Price
    # ------------------------------------------------------------------

    @property
    def total_price(self) -> Decimal:
        if self.selected_vehicle is None:
            return Decimal("0")
        return calculation_service.calculate_total(self.selected_vehicle.price_per_hour, self.hours)

    @property
    def display_total(self) -> str:
        return calculation_service.format_amount(self.total_price)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting and self.selected_vehicle is not None

    def build_payload(self) -> dict:
        return {
            "vehicle_id": self.selected_vehicle.id,
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "licence_no": self.licence_no,
            "nationality": Nationality(self.nationality).value,
            "mobile_no": self.mobile_no,
            "booking_date": self.booking_date.isoformat(),
            "hours": self.hours,
            "total_price": float(self.total_price),
            "vehicle_name": self.selected_vehicle.name,
        }

    async def submit(self) -> bool:
        """
        Send the booking once. Returns True when the site accepted it.

        Nothing is sent while a submission is in flight, or when the
        vehicle, date or email is missing.
        """
        if self.is_submitting:
            return False

        if not self.selected_vehicle or not self.booking_date or not self.customer_email:
            self._notify("error", MISSING_FIELDS_MESSAGE)
            return False

        self.is_submitting = True
        try:
            response = await self.client.post(BOOKINGS_PATH, json=self.build_payload())
            if response.is_success:
                self.is_success = True
                self._notify("success", SUCCESS_MESSAGE)
                self._schedule_redirect("/")
                return True

            logger.warning(f"Booking rejected: HTTP {response.status_code}")
            self._notify("error", ERROR_MESSAGE)
            return False
        except httpx.HTTPError as e:
            logger.error(f"Booking request failed: {e}")
            self._notify("error", ERROR_MESSAGE)
            return False
        finally:
            self.is_submitting = False

    def _notify(self, level: str, message: str) -> None:
        self.notifications.append(Notification(level=level, message=message))

    def _schedule_redirect(self, path: str) -> None:
        self.redirect_to = path
        if self.on_redirect is not None:
            asyncio.get_running_loop().call_later(
                settings.BOOKING_REDIRECT_SECONDS, self.on_redirect, path
            )
