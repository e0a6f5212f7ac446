from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MeetingRequest(CamelModel):
    """Fields parsed from a [SCHEDULE_MEETING] block. No format validation."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    preferred_date: Optional[str] = None
    preferred_time: Optional[str] = None
    meeting_type: Optional[str] = None
    notes: Optional[str] = None


class Meeting(MeetingRequest):
    id: str
    status: Literal["scheduled"] = "scheduled"
    created_at: datetime
    updated_at: Optional[datetime] = None
    meeting_link: str
    calendar_link: str


class MeetingSummary(CamelModel):
    """Compact view of a freshly scheduled meeting returned by /chat."""

    id: str
    meeting_link: str
    calendar_link: str
    scheduled_for: str
    meeting_type: str = Field(default="Demo")


class RescheduleRequest(CamelModel):
    preferred_date: Optional[str] = None
    preferred_time: Optional[str] = None
