"""
In-memory meeting store.

Responsibilities:
- Assign random, unique meeting ids
- Compute join/calendar links once, at creation
- Create, read, reschedule and cancel meetings atomically

Nothing is persisted; a restart wipes every meeting.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.errors import MeetingNotFoundError
from app.meetings import links
from app.meetings.schemas import Meeting, MeetingRequest, RescheduleRequest

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MeetingStore:
    """
    Thread-safe mapping of meeting id -> Meeting.

    Usage:
        store = MeetingStore()
        meeting_id = store.create(request)
        meeting = store.get(meeting_id)
    """

    def __init__(
        self,
        *,
        base_url: str = links.DEFAULT_MEETING_BASE_URL,
        event_title: str = links.DEFAULT_EVENT_TITLE,
        event_host: str = links.DEFAULT_EVENT_HOST,
    ) -> None:
        self._meetings: Dict[str, Meeting] = {}
        self._lock = threading.RLock()
        self._base_url = base_url
        self._event_title = event_title
        self._event_host = event_host

    def __len__(self) -> int:
        with self._lock:
            return len(self._meetings)

    def __contains__(self, meeting_id: object) -> bool:
        with self._lock:
            return meeting_id in self._meetings

    # Internal helpers ------------------------------------------------------------------

    @staticmethod
    def _new_id() -> str:
        # uuid4 draws 122 random bits from os.urandom; reissue is negligible
        return str(uuid.uuid4())

    def _require(self, meeting_id: str) -> Meeting:
        meeting = self._meetings.get(meeting_id)
        if meeting is None:
            raise MeetingNotFoundError(meeting_id)
        return meeting

    # Public API ------------------------------------------------------------------

    def create(self, request: MeetingRequest, *, now: Optional[datetime] = None) -> str:
        """
        Store a new scheduled meeting built from `request`.

        Returns:
            str: The freshly assigned meeting id
        """
        created_at = now or _utcnow()

        with self._lock:
            meeting_id = self._new_id()
            meeting = Meeting(
                **request.model_dump(exclude_none=True),
                id=meeting_id,
                status="scheduled",
                created_at=created_at,
                meeting_link=links.create_meeting_link(meeting_id, self._base_url),
                calendar_link=links.generate_calendar_invite(
                    request,
                    meeting_id,
                    now=created_at,
                    base_url=self._base_url,
                    title=self._event_title,
                    host=self._event_host,
                ),
            )
            self._meetings[meeting_id] = meeting

        logger.info("[MEETING_STORE] Created meeting %s", meeting_id)
        return meeting_id

    def get(self, meeting_id: str) -> Meeting:
        with self._lock:
            return self._require(meeting_id).model_copy()

    def list(self) -> List[Meeting]:
        with self._lock:
            return [meeting.model_copy() for meeting in self._meetings.values()]

    def update(self, meeting_id: str, changes: RescheduleRequest) -> Meeting:
        """
        Reschedule a meeting.

        Only non-empty preferred date/time values are merged; `updated_at`
        is always refreshed. Links are left as computed at creation.
        """
        updates = {
            field: value
            for field, value in (
                ("preferred_date", changes.preferred_date),
                ("preferred_time", changes.preferred_time),
            )
            if value
        }

        with self._lock:
            meeting = self._require(meeting_id)
            updates["updated_at"] = _utcnow()
            updated = meeting.model_copy(update=updates)
            self._meetings[meeting_id] = updated

        logger.info(
            "[MEETING_STORE] Rescheduled meeting %s (fields=%s)",
            meeting_id,
            sorted(updates),
        )
        return updated.model_copy()

    def delete(self, meeting_id: str) -> Meeting:
        """Remove a meeting and return the record that was removed."""
        with self._lock:
            meeting = self._require(meeting_id)
            del self._meetings[meeting_id]

        logger.info("[MEETING_STORE] Cancelled meeting %s", meeting_id)
        return meeting
