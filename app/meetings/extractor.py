"""
Meeting request extraction from model replies.

The model is instructed to emit a block like:

    [SCHEDULE_MEETING]
    Name: Jane
    Email: jane@example.com
    Preferred Date: next Tuesday
    ...
    [/SCHEDULE_MEETING]

Only the first block is parsed. Fields are matched case-insensitively,
first match wins, values are trimmed and never validated.
"""

import logging
import re
from typing import Optional

from app.meetings.schemas import MeetingRequest

logger = logging.getLogger(__name__)

OPEN_MARKER = "[SCHEDULE_MEETING]"
CLOSE_MARKER = "[/SCHEDULE_MEETING]"

MEETING_BLOCK_RE = re.compile(
    re.escape(OPEN_MARKER) + r"(.*?)" + re.escape(CLOSE_MARKER),
    re.DOTALL,
)

# Attribute name -> label as written by the model
FIELD_LABELS = {
    "name": "Name",
    "email": "Email",
    "phone": "Phone",
    "preferred_date": "Preferred Date",
    "preferred_time": "Preferred Time",
    "meeting_type": "Meeting Type",
    "notes": "Notes",
}

FIELD_PATTERNS = {
    field: re.compile(re.escape(label) + r":[ \t]*([^\r\n]*)", re.IGNORECASE)
    for field, label in FIELD_LABELS.items()
}


def parse_meeting_request(text: Optional[str]) -> Optional[MeetingRequest]:
    """
    Return the MeetingRequest found in `text`, or None when there is no
    complete delimited block.

    A block with no recognizable fields still yields an empty MeetingRequest.
    """
    if not text:
        return None

    match = MEETING_BLOCK_RE.search(text)
    if not match:
        return None

    block = match.group(1)
    fields = {}

    for field, pattern in FIELD_PATTERNS.items():
        found = pattern.search(block)
        if not found:
            continue
        value = found.group(1).strip()
        if value:
            fields[field] = value

    logger.info("[EXTRACT_MEETING] Parsed fields: %s", sorted(fields))
    return MeetingRequest(**fields)


def strip_meeting_blocks(text: str) -> str:
    """Remove every delimited block from `text` and trim the result."""
    return MEETING_BLOCK_RE.sub("", text).strip()
