"""
Join links and calendar invites for scheduled meetings.

Both are computed once when a meeting is created. The calendar invite covers
a one hour window starting at generation time.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import quote, urlencode

from app.meetings.schemas import MeetingRequest

DEFAULT_MEETING_BASE_URL = "https://meet.leadmate.com/join"
DEFAULT_EVENT_TITLE = "LeadMate CRM Demo"
DEFAULT_EVENT_HOST = "Martin from LeadMate CRM"

CALENDAR_TEMPLATE_URL = "https://calendar.google.com/calendar/render"
MEETING_DURATION = timedelta(hours=1)


def create_meeting_link(
    meeting_id: str, base_url: str = DEFAULT_MEETING_BASE_URL
) -> str:
    return f"{base_url.rstrip('/')}/{meeting_id}"


def format_calendar_timestamp(moment: datetime) -> str:
    """
    Compact UTC form used by Google Calendar, e.g. 20260119T150000Z.

    Naive datetimes are taken to be UTC. Sub-second precision is dropped.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def generate_calendar_invite(
    request: MeetingRequest,
    meeting_id: str,
    *,
    now: Optional[datetime] = None,
    base_url: str = DEFAULT_MEETING_BASE_URL,
    title: str = DEFAULT_EVENT_TITLE,
    host: str = DEFAULT_EVENT_HOST,
) -> str:
    """
    Build a Google Calendar "add event" URL for the meeting.

    Args:
        request: Parsed meeting fields; the email, if any, is added as a guest.
        meeting_id: Identifier the join link is derived from.
        now: Start of the invite window. Defaults to the current UTC time.

    Returns:
        str: The calendar template URL
    """
    start = now or datetime.now(timezone.utc)
    end = start + MEETING_DURATION
    meeting_link = create_meeting_link(meeting_id, base_url)

    params = {
        "action": "TEMPLATE",
        "text": title,
        "dates": f"{format_calendar_timestamp(start)}/{format_calendar_timestamp(end)}",
        "details": f"Meeting with {host}\n\nMeeting Link: {meeting_link}",
        "location": meeting_link,
    }
    if request.email:
        params["add"] = request.email

    return f"{CALENDAR_TEMPLATE_URL}?{urlencode(params, quote_via=quote, safe='/:')}"
