"""Rental price computation.

The monthly policy counts calendar-month boundaries only and ignores the day of
the month: Jan 31 -> Feb 1 is one month, Jan 1 -> Jan 31 is clamped to one.
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from errors import ValidationFailure

MODE_MONTHLY = "mensal"
MODE_DAILY = "diario"
MODE_FIXED = "informado"

MODES = (MODE_MONTHLY, MODE_DAILY, MODE_FIXED)


def check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"Unknown pricing mode: {mode!r}; expected one of {', '.join(MODES)}")
    return mode


def months_between(start: date, end: date) -> int:
    """Calendar months from start to end, never less than 1."""
    diff = (end.year - start.year) * 12 + (end.month - start.month)
    return max(1, diff)


def days_between(start: date, end: date) -> int:
    return (end - start).days


def monthly_total(start: date, end: date, rate) -> Decimal:
    return months_between(start, end) * Decimal(rate)


def daily_total(start: date, end: date, rate) -> Decimal:
    return days_between(start, end) * Decimal(rate)


def compute_total(
    mode: str,
    start: date,
    end: date,
    rate,
    informed_total: Optional[Decimal] = None,
) -> Decimal:
    """Total charge for a rental under the configured pricing mode."""
    if mode == MODE_MONTHLY:
        return monthly_total(start, end, rate)
    if mode == MODE_DAILY:
        return daily_total(start, end, rate)
    if mode == MODE_FIXED:
        if informed_total is None:
            raise ValidationFailure("valor_total is required when pricing mode is 'informado'")
        return Decimal(informed_total)
    raise ValueError(f"Unknown pricing mode: {mode!r}")
