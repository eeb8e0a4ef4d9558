# client/app/services/slots/clock.py
"""
Time sources for slot derivation.

The derivation never reads the system clock itself; callers pass a clock.
"""

from datetime import datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """
    Wall clock of the learner.

    tz=None uses the machine's local zone, read on every call.
    """

    def __init__(self, tz: tzinfo | str | None = None):
        self.tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now().astimezone()
        return datetime.now(self.tz)


class FixedClock:
    """Always returns the same moment. Used in tests and replays."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment
