"""
Calculation Service - Booking Prices and Revenue

This service handles all money arithmetic:
- Booking total (hourly rate × hours)
- Verification of a client-submitted total against the vehicle rate
- Confirmed revenue for the admin dashboard
- Display formatting in the site currency

Uses Decimal for precision to avoid floating-point errors.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, Union
from app.core.config import settings
from app.models.booking import BookingStatus


Amount = Union[Decimal, float, int, str]

CENTS = Decimal("0.01")


def to_decimal(value: Amount) -> Decimal:
    """Convert a wire/store amount to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class CalculationService:
    """Service for booking calculations with precise decimal arithmetic"""

    def __init__(self, currency: str = None, max_hours: int = None):
        """
        Initialize calculation service.

        Args:
            currency: Display currency. Defaults to settings value.
            max_hours: Longest bookable duration. Defaults to settings value.
        """
        self.currency = currency or settings.CURRENCY
        self.max_hours = max_hours or settings.MAX_BOOKING_HOURS

    def calculate_total(self, price_per_hour: Amount, hours: int) -> Decimal:
        """
        Calculate the booking total.

        Formula: price_per_hour × hours

        Args:
            price_per_hour: Vehicle hourly rate (>= 0)
            hours: Whole hours, 1..max_hours

        Returns:
            Exact total (not rounded)

        Raises:
            ValueError: If the rate is negative or hours are out of range
        """
        rate = to_decimal(price_per_hour)
        if rate < 0:
            raise ValueError("Hourly price cannot be negative")
        if isinstance(hours, bool) or not isinstance(hours, int):
            raise ValueError("Hours must be a whole number")
        if hours < 1 or hours > self.max_hours:
            raise ValueError(f"Hours must be between 1 and {self.max_hours}")

        return rate * hours

    def round_amount(self, amount: Amount) -> Decimal:
        """Round to the currency's conventional precision (cents)."""
        return to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)

    def format_amount(self, amount: Amount) -> str:
        """Format for display, e.g. '360.00 CHF'."""
        return f"{self.round_amount(amount)} {self.currency}"

    def totals_match(self, submitted: Amount, expected: Amount) -> bool:
        """Compare two totals at display precision."""
        return self.round_amount(submitted) == self.round_amount(expected)

    def confirmed_revenue(self, bookings: Iterable[Dict[str, Any]]) -> Decimal:
        """
        Sum total_price over bookings whose status is exactly 'confirmed'.

        The comparison is case-sensitive; every other status is ignored.
        """
        total = Decimal("0")
        for booking in bookings:
            if booking.get("status") == BookingStatus.CONFIRMED.value:
                total += to_decimal(booking.get("total_price") or 0)

        return self.round_amount(total)


# Singleton instance for easy import
calculation_service = CalculationService()
