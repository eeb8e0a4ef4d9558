# client/app/schemas/sessions.py
"""
Pydantic schemas for tutoring session requests.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator


def is_in_person(session_type: str) -> bool:
    """True for "In-Person", "IN_PERSON" or "in person"."""
    return session_type.strip().upper().replace("-", "_").replace(" ", "_") == "IN_PERSON"


class SessionRequest(BaseModel):
    """Body of POST /tutoring-sessions/createSession."""
    tutor_id: int = Field(alias="tutorId")
    student_id: int = Field(alias="studentId")
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    duration_minutes: int = Field(alias="durationMinutes", gt=0)
    subject: str
    session_type: str = Field("ONLINE", alias="sessionType")
    notes: str | None = None
    location_data: str | None = Field(None, alias="locationData")
    price: float | None = Field(None, ge=0)
    status: str = "PENDING"  # until the tutor accepts

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def check_time_order(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self

    @model_validator(mode="after")
    def location_only_in_person(self):
        if not is_in_person(self.session_type) or not (self.location_data or "").strip():
            self.location_data = None
        return self

    def to_payload(self) -> dict:
        """JSON body with camelCase keys and ISO-8601 timestamps."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
