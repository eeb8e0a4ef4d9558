from datetime import datetime, timezone

import pytest

from client.app.schemas.availability import WeeklyAvailability
from client.app.services.slots import FixedClock

# Wednesday, 2026-10-14 10:00 UTC
NOW = datetime(2026, 10, 14, 10, 0, tzinfo=timezone.utc)


def avail(day: str | None, start: str | None, end: str | None, id: int = 1) -> WeeklyAvailability:
    return WeeklyAvailability(id=id, tutor_id=7, day_of_week=day, start_time=start, end_time=end)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)
