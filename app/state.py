from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from app.meetings.schemas import MeetingRequest, MeetingSummary


class ChatState(BaseModel):
    """
    State of a single /chat request as it moves through the workflow.
    Nothing here outlives the request; meetings live in the MeetingStore.
    """

    message: str
    raw_history: List[Any] = Field(
        default_factory=list, description="History exactly as the caller sent it"
    )
    history: List[Dict[str, Any]] = Field(
        default_factory=list, description="Normalized history for the chat model"
    )

    reply: Optional[str] = Field(
        default=None, description="Reply text, rewritten once a meeting is stored"
    )
    meeting_request: Optional[MeetingRequest] = None
    meeting: Optional[MeetingSummary] = None
