# client/app/flows/booking.py
"""
Booking flow for a learner.

Flow:
1. Load tutor availability (one snapshot per interaction)
2. Day (Level 1: available dates)
3. Duration + time (Level 2: time slots)
4. Confirm → POST /tutoring-sessions/createSession
"""

import logging
from datetime import date, datetime

from client.app.config import settings
from client.app.exceptions import AvailabilityFetchError, BookingSubmitError, SlotExpiredError
from client.app.schemas.availability import WeeklyAvailability
from client.app.schemas.sessions import SessionRequest
from client.app.services.slots import (
    BookingConfig,
    Clock,
    SystemClock,
    TimeSlot,
    compute_available_dates,
    compute_time_slots,
    get_booking_config,
)
from client.app.utils.api import ApiClient, api

logger = logging.getLogger(__name__)


class BookingFlow:
    """One booking interaction between a learner and a tutor."""

    def __init__(
        self,
        tutor_id: int,
        student_id: int,
        api_client: ApiClient | None = None,
        clock: Clock | None = None,
        config: BookingConfig | None = None,
        hourly_rate: float | None = None,
    ):
        self.tutor_id = tutor_id
        self.student_id = student_id
        self.hourly_rate = hourly_rate
        self.api = api_client or api
        self.clock = clock or SystemClock(settings.TIMEZONE)
        self.config = config or get_booking_config()
        self.availability: list[WeeklyAvailability] = []
        self.loaded = False

    async def load(self) -> list[WeeklyAvailability]:
        logger.info(f"[BOOKING] Loading availability for tutor_id={self.tutor_id}")
        result = await self.api.get_tutor_availability(self.tutor_id)
        if result is None:
            raise AvailabilityFetchError(
                "Failed to load availability",
                {"tutor_id": self.tutor_id},
            )
        self.availability = result
        self.loaded = True
        return result

    # ------------------------------------------------------------------
    # Dates and slots
    # ------------------------------------------------------------------

    def available_dates(self) -> list[date]:
        return compute_available_dates(self.availability, self.clock, config=self.config)

    def time_slots(self, target_date: date | str, duration_minutes: int) -> list[TimeSlot]:
        self._check_duration(duration_minutes)
        day = _parse_date(target_date)
        if day is None:
            logger.warning(f"[BOOKING] Unparsable date {target_date!r}")
            return []
        return compute_time_slots(
            self.availability, day, duration_minutes, self.clock, config=self.config
        )

    def slot_options(self, target_date: date | str, duration_minutes: int) -> list[tuple[str, TimeSlot]]:
        """(label, slot) pairs for a time picker."""
        return [(slot.label, slot) for slot in self.time_slots(target_date, duration_minutes)]

    def _check_duration(self, duration_minutes: int) -> None:
        if duration_minutes not in self.config.allowed_durations:
            raise ValueError(
                f"Unsupported duration {duration_minutes}, "
                f"expected one of {self.config.allowed_durations}"
            )

    def quote(self, duration_minutes: int) -> float | None:
        """Session price summary: hourly rate × duration. None without a rate."""
        if self.hourly_rate is None:
            return None
        self._check_duration(duration_minutes)
        return quote_price(self.hourly_rate, duration_minutes)

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def build_request(
        self,
        slot: TimeSlot,
        subject: str,
        session_type: str = "ONLINE",
        notes: str | None = None,
        location: str | None = None,
    ) -> SessionRequest:
        now = self.clock.now()
        if slot.start <= now:
            raise SlotExpiredError(
                "Selected time slot has already started",
                {"start": slot.start.isoformat(), "now": now.isoformat()},
            )

        duration_minutes = int(slot.duration.total_seconds() // 60)
        price = None
        if self.hourly_rate is not None:
            price = quote_price(self.hourly_rate, duration_minutes)

        return SessionRequest(
            tutor_id=self.tutor_id,
            student_id=self.student_id,
            start_time=slot.start,
            end_time=slot.end,
            duration_minutes=duration_minutes,
            subject=subject,
            session_type=session_type,
            notes=notes or None,
            location_data=location,
            price=price,
        )

    async def submit(
        self,
        slot: TimeSlot,
        subject: str,
        session_type: str = "ONLINE",
        notes: str | None = None,
        location: str | None = None,
    ) -> dict:
        request = self.build_request(slot, subject, session_type, notes, location)
        logger.info(
            f"[BOOKING] Creating: tutor={self.tutor_id}, student={self.student_id}, "
            f"start={slot.start.isoformat()}, duration={request.duration_minutes}"
        )

        result = await self.api.create_session(request)
        if result is None:
            raise BookingSubmitError(
                "Failed to create tutoring session",
                {"tutor_id": self.tutor_id, "start": slot.start.isoformat()},
            )
        return result


def quote_price(hourly_rate: float, duration_minutes: int) -> float:
    """Price of a session, rounded to cents."""
    return round(hourly_rate * duration_minutes / 60, 2)


def _parse_date(value: date | str) -> date | None:
    """Accept a date or "YYYY-MM-DD"."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None
