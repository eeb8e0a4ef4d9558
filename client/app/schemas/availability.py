# client/app/schemas/availability.py
"""
Pydantic schemas for tutor availability as returned by the backend.

Fields stay raw text: a record with a bad time or weekday still parses
and is rejected later by the slots validation step.
"""

from pydantic import BaseModel, ConfigDict, Field


class WeeklyAvailability(BaseModel):
    """Recurring weekly window, e.g. MONDAY 09:00-12:00."""
    id: int | None = None
    tutor_id: int | None = Field(None, alias="tutorId")
    day_of_week: str | None = Field(None, alias="dayOfWeek")
    start_time: str | None = Field(None, alias="startTime")
    end_time: str | None = Field(None, alias="endTime")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")
