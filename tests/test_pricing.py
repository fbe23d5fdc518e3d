from datetime import date
from decimal import Decimal

import pytest

import pricing
from errors import ValidationFailure


@pytest.mark.parametrize("start, end, expected", [
    (date(2024, 1, 10), date(2024, 3, 10), 2),
    (date(2024, 1, 1), date(2024, 1, 31), 1),
    (date(2024, 1, 31), date(2024, 2, 1), 1),
    (date(2023, 12, 15), date(2024, 1, 5), 1),
    (date(2024, 1, 1), date(2025, 1, 1), 12),
    (date(2024, 5, 1), date(2024, 2, 1), 1),
])
def test_months_between(start, end, expected):
    assert pricing.months_between(start, end) == expected


def test_monthly_total_ignores_day_of_month():
    # Jan 31 -> Mar 1 crosses two month boundaries
    total = pricing.monthly_total(date(2024, 1, 31), date(2024, 3, 1), Decimal("1000.00"))
    assert total == Decimal("2000.00")


def test_monthly_total_scenario():
    assert pricing.monthly_total(date(2024, 1, 10), date(2024, 3, 10), 1000) == Decimal(2000)


def test_daily_total():
    assert pricing.daily_total(date(2024, 1, 1), date(2024, 1, 11), Decimal("50")) == Decimal("500")


def test_compute_total_dispatches_on_mode():
    start, end = date(2024, 1, 1), date(2024, 2, 1)
    assert pricing.compute_total(pricing.MODE_MONTHLY, start, end, 900) == Decimal(900)
    assert pricing.compute_total(pricing.MODE_DAILY, start, end, 10) == Decimal(310)


def test_compute_total_fixed_uses_informed_value():
    total = pricing.compute_total(
        pricing.MODE_FIXED, date(2024, 1, 1), date(2024, 6, 1), 1000, Decimal("4321.50")
    )
    assert total == Decimal("4321.50")


def test_compute_total_fixed_requires_value():
    with pytest.raises(ValidationFailure):
        pricing.compute_total(pricing.MODE_FIXED, date(2024, 1, 1), date(2024, 6, 1), 1000)


def test_compute_total_unknown_mode():
    with pytest.raises(ValueError):
        pricing.compute_total("semanal", date(2024, 1, 1), date(2024, 2, 1), 1000)


def test_check_mode_accepts_known_modes():
    for mode in pricing.MODES:
        assert pricing.check_mode(mode) == mode


def test_check_mode_rejects_unknown_mode():
    with pytest.raises(ValueError, match="monthly"):
        pricing.check_mode("monthly")
