# client/app/services/slots/calculator.py
"""
Level 2: Concrete time slots for one date and one session duration.

Candidate starts walk each matching window at slot_step_minutes:

  09:00, 09:30, 10:00, ...   while start + duration <= window end

Slots already started (today, start <= now) are skipped. Overlapping
windows never produce two slots with the same start.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable

from client.app.schemas.availability import WeeklyAvailability
from .clock import Clock
from .config import BookingConfig, get_booking_config
from .windows import valid_windows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeSlot:
    """
    One bookable interval. start/end share the clock's tzinfo.

    Starts are wall-clock times: on a spring-forward day two starts
    around the skipped hour (02:00, 03:00) can be the same instant.
    """
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def label(self) -> str:
        """Short display time, e.g. "09:30"."""
        return self.start.strftime("%H:%M")


def compute_time_slots(
    availabilities: Iterable[WeeklyAvailability],
    target_date: date,
    duration_minutes: int,
    clock: Clock,
    config: BookingConfig | None = None,
) -> list[TimeSlot]:
    """
    Calculate bookable slots on target_date.

    Returns:
        Slots sorted by start, unique by start. Empty list = no slots.
    """
    config = config or get_booking_config()

    if duration_minutes <= 0:
        logger.warning(f"[SLOTS] Ignoring non-positive duration {duration_minutes}")
        return []

    now = clock.now()
    tz = now.tzinfo
    is_today = target_date == now.date()

    duration = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=config.slot_step_minutes)
    weekday = target_date.weekday()

    by_start: dict[datetime, TimeSlot] = {}

    for window in valid_windows(availabilities):
        if window.weekday != weekday:
            continue

        current = datetime.combine(target_date, window.start, tzinfo=tz)
        window_end = datetime.combine(target_date, window.end, tzinfo=tz)

        while current + duration <= window_end:
            if not (is_today and current <= now) and current not in by_start:
                by_start[current] = TimeSlot(start=current, end=current + duration)
            current += step

    slots = [by_start[start] for start in sorted(by_start)]
    logger.debug(
        f"[SLOTS] {target_date.isoformat()} duration={duration_minutes}: {len(slots)} slot(s)"
    )
    return slots
