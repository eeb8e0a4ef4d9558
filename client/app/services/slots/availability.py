# client/app/services/slots/availability.py
"""
Level 1: Which calendar dates can be booked at all.

A date is available when at least one valid weekly window falls on its
weekday and the date lies within the booking horizon:

  today .. today + horizon_days, capped at today + max_advance_months
"""

import logging
from datetime import date, timedelta
from typing import Iterable

from client.app.schemas.availability import WeeklyAvailability
from .clock import Clock
from .config import BookingConfig, get_booking_config
from .windows import valid_windows

logger = logging.getLogger(__name__)


def compute_available_dates(
    availabilities: Iterable[WeeklyAvailability],
    clock: Clock,
    horizon_days: int | None = None,
    config: BookingConfig | None = None,
) -> list[date]:
    """
    Calculate bookable dates from weekly availability.

    Returns:
        Sorted list of unique dates. Empty list = no availability found.
    """
    config = config or get_booking_config()
    if horizon_days is None:
        horizon_days = config.horizon_days

    today = clock.now().date()
    max_date = config.max_bookable_date(today)

    weekdays = {window.weekday for window in valid_windows(availabilities)}
    if not weekdays:
        logger.info("[SLOTS] No valid availability windows")
        return []

    dates: set[date] = set()
    for offset in range(horizon_days + 1):
        day = today + timedelta(days=offset)
        if day > max_date:
            break
        if day.weekday() in weekdays:
            dates.add(day)

    return sorted(dates)
