from decimal import Decimal

import pytest

from app.services.calculation_service import CalculationService, calculation_service


@pytest.mark.parametrize("rate", [0, 105, 110, 120, "99.95", "120.50", "0.01"])
def test_total_is_rate_times_hours_for_every_duration(rate):
    for hours in range(1, 25):
        total = calculation_service.calculate_total(rate, hours)
        assert total == Decimal(str(rate)) * hours


def test_float_rates_do_not_pick_up_binary_noise():
    assert calculation_service.calculate_total(99.95, 3) == Decimal("299.85")
    assert calculation_service.calculate_total(0.1, 3) == Decimal("0.3")


@pytest.mark.parametrize("hours", [0, -1, 25, 100])
def test_hours_outside_bookable_range_are_rejected(hours):
    with pytest.raises(ValueError):
        calculation_service.calculate_total(120, hours)


def test_fractional_hours_are_rejected():
    with pytest.raises(ValueError):
        calculation_service.calculate_total(120, 1.5)


def test_negative_rate_is_rejected():
    with pytest.raises(ValueError):
        calculation_service.calculate_total(-1, 2)


def test_format_amount_uses_currency_precision():
    service = CalculationService(currency="CHF")
    assert service.format_amount(Decimal("360")) == "360.00 CHF"
    assert service.format_amount(Decimal("10.005")) == "10.01 CHF"
    assert service.format_amount(0) == "0.00 CHF"


def test_totals_match_at_display_precision():
    assert calculation_service.totals_match(0.1 * 3, Decimal("0.3"))
    assert calculation_service.totals_match(360, Decimal("360.00"))
    assert not calculation_service.totals_match(359.99, Decimal("360"))


def test_confirmed_revenue_is_case_sensitive():
    bookings = [
        {"status": "confirmed", "total_price": 240},
        {"status": "confirmed", "total_price": "105.50"},
        {"status": "Confirmed", "total_price": 1000},
        {"status": "CONFIRMED", "total_price": 1000},
        {"status": "pending", "total_price": 360},
        {"status": "cancelled", "total_price": 120},
        {"status": None, "total_price": 50},
    ]
    assert calculation_service.confirmed_revenue(bookings) == Decimal("345.50")


def test_confirmed_revenue_of_nothing_is_zero():
    assert calculation_service.confirmed_revenue([]) == Decimal("0.00")


def test_max_hours_is_configurable():
    service = CalculationService(max_hours=48)
    assert service.calculate_total(10, 48) == Decimal("480")
