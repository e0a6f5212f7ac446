from app.meetings.schemas import Meeting, MeetingRequest, MeetingSummary

DEFAULT_MEETING_TYPE = "Demo"
UNSPECIFIED_SCHEDULE = "a time to be confirmed"


def describe_schedule(request: MeetingRequest) -> str:
    """Combine preferred date and time, e.g. "next Tuesday at 3pm"."""
    parts = [p for p in (request.preferred_date, request.preferred_time) if p]
    if not parts:
        return UNSPECIFIED_SCHEDULE
    return " at ".join(parts)


def summarize_meeting(meeting: Meeting) -> MeetingSummary:
    return MeetingSummary(
        id=meeting.id,
        meeting_link=meeting.meeting_link,
        calendar_link=meeting.calendar_link,
        scheduled_for=describe_schedule(meeting),
        meeting_type=meeting.meeting_type or DEFAULT_MEETING_TYPE,
    )


def confirmation_message(summary: MeetingSummary) -> str:
    """Paragraph appended to the model reply once a meeting is stored."""
    return (
        f"✅ Perfect! I've scheduled your {summary.meeting_type.lower()} "
        f"for {summary.scheduled_for}.\n"
        "\n"
        "📅 **Meeting Details:**\n"
        f"• Meeting ID: {summary.id}\n"
        f"• Join Link: {summary.meeting_link}\n"
        "• Add to Calendar: Click the calendar link below\n"
        "\n"
        "I'll send you a confirmation email shortly. Looking forward to our meeting!"
    )
