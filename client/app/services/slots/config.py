# client/app/services/slots/config.py
"""
Booking configuration for slot derivation.
"""

import re
from dataclasses import dataclass
from datetime import date, time
from functools import lru_cache

from dateutil.relativedelta import relativedelta

from client.app.config import settings

# Strict 24-hour "HH:MM"
TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

DAY_NAMES = [
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
]


@dataclass(frozen=True)
class BookingConfig:
    """
    Configuration for the booking/slots derivation.

    Attributes:
        horizon_days: How many days ahead to scan for available dates
        max_advance_months: Hard cap on how far ahead a date may be booked
        slot_step_minutes: Stride between candidate slot starts
        allowed_durations: Session lengths a learner can pick, in minutes
    """
    horizon_days: int = 31
    max_advance_months: int = 1
    slot_step_minutes: int = 30
    allowed_durations: tuple[int, ...] = (60, 90, 120, 150, 180)

    def __post_init__(self):
        """Validate configuration."""
        if self.slot_step_minutes <= 0 or (24 * 60) % self.slot_step_minutes:
            raise ValueError(
                f"slot_step_minutes must evenly divide a day, got {self.slot_step_minutes}"
            )
        if self.horizon_days < 0:
            raise ValueError(f"horizon_days must be >= 0, got {self.horizon_days}")

    def max_bookable_date(self, today: date) -> date:
        """
        Last date that may be booked.

        Calendar month arithmetic, clamped to month end:
        Jan 31 → Feb 28/29.
        """
        return today + relativedelta(months=self.max_advance_months)


@lru_cache
def get_booking_config() -> BookingConfig:
    """Get booking configuration (singleton), horizon from settings."""
    return BookingConfig(horizon_days=settings.HORIZON_DAYS)


def parse_time_str(value: object) -> time | None:
    """
    Parse strict "HH:MM" into a time.

    Returns None for anything else ("9:00", " 09:00 ", "09:00:00", "25:99", None).
    """
    if not isinstance(value, str):
        return None
    match = TIME_PATTERN.fullmatch(value)
    if not match:
        return None
    return time(int(match.group(1)), int(match.group(2)))


def normalize_day_name(value: object) -> str | None:
    """Normalize a weekday name: " Monday " → "MONDAY", unknown → None."""
    if not isinstance(value, str):
        return None
    name = value.strip().upper()
    return name if name in DAY_NAMES else None
