# client/app/services/slots/windows.py
"""
Validation of weekly availability records.

Every raw record gets a verdict: either a usable AvailabilityWindow or a
rejection reason. Rejected records contribute nothing to dates or slots.
"""

import logging
from dataclasses import dataclass
from datetime import time
from typing import Iterable

from client.app.schemas.availability import WeeklyAvailability
from .config import DAY_NAMES, normalize_day_name, parse_time_str

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityWindow:
    """Validated weekly window. weekday: 0 = Monday, 6 = Sunday."""
    weekday: int
    start: time
    end: time
    source: WeeklyAvailability | None = None

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.weekday]


@dataclass(frozen=True)
class WindowCheck:
    """Verdict for one availability record."""
    record: WeeklyAvailability
    window: AvailabilityWindow | None
    reason: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.window is not None


def check_availability(record: WeeklyAvailability) -> WindowCheck:
    """Validate a single record without raising."""
    day = normalize_day_name(record.day_of_week)
    if day is None:
        return WindowCheck(record, None, f"unknown day_of_week {record.day_of_week!r}")

    start = parse_time_str(record.start_time)
    end = parse_time_str(record.end_time)
    if start is None or end is None:
        return WindowCheck(
            record, None,
            f"bad time format {record.start_time!r}-{record.end_time!r}",
        )

    if start >= end:
        return WindowCheck(record, None, f"start {record.start_time} not before end {record.end_time}")

    window = AvailabilityWindow(
        weekday=DAY_NAMES.index(day),
        start=start,
        end=end,
        source=record,
    )
    return WindowCheck(record, window)


def valid_windows(records: Iterable[WeeklyAvailability]) -> list[AvailabilityWindow]:
    """Keep only usable windows; log the rest."""
    windows = []
    for record in records:
        checked = check_availability(record)
        if checked.is_valid:
            windows.append(checked.window)
        else:
            logger.warning(f"[SLOTS] Skipping availability id={record.id}: {checked.reason}")
    return windows
