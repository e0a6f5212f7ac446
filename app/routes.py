"""
HTTP routes for chat and meeting management.

The meeting store and the compiled conversation graph are created once in
create_app() and reached through app.state.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from fastapi import APIRouter, Body, Depends, Request
from pydantic import ValidationError

from app.errors import (
    AppError,
    ClientInputError,
    UnclassifiedFailure,
    UpstreamFormatError,
    describe_validation_errors,
)
from app.meetings.schemas import RescheduleRequest
from app.meetings.store import MeetingStore
from app.workflow import run_chat

logger = logging.getLogger(__name__)

# Message the chat model returns when history does not start with a user turn
ROLE_ORDER_ERROR = "First content should be with role"

router = APIRouter()


# Dependencies ------------------------------------------------------------------


def get_meeting_store(request: Request) -> MeetingStore:
    return request.app.state.meeting_store


def get_conversation_graph(request: Request):
    return request.app.state.conversation_graph


# Validation ------------------------------------------------------------------


def validate_chat_request(payload: Any) -> Tuple[str, list]:
    """Return (trimmed message, history) or raise ClientInputError."""
    if not isinstance(payload, dict):
        raise ClientInputError("Request body must be a JSON object.")

    message = payload.get("message")
    if not isinstance(message, str) or not message.strip():
        raise ClientInputError('Request body must contain a valid "message" string.')

    history = payload.get("history")
    if not isinstance(history, list):
        raise ClientInputError('Request body must contain "history" as an array.')

    return message.strip(), history


def parse_reschedule_request(payload: Any) -> RescheduleRequest:
    """Validate a PUT /meetings body; a missing body changes nothing."""
    if payload is None:
        return RescheduleRequest()
    if not isinstance(payload, dict):
        raise ClientInputError("Request body must be a JSON object.")
    try:
        return RescheduleRequest.model_validate(payload)
    except ValidationError as e:
        raise ClientInputError(describe_validation_errors(e.errors())) from e


# Routes ------------------------------------------------------------------


@router.get("/")
async def health() -> Dict[str, Any]:
    return {
        "status": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/chat")
async def chat(
    payload: Any = Body(default=None),
    conversation_graph=Depends(get_conversation_graph),
) -> Dict[str, Any]:
    message, history = validate_chat_request(payload)
    logger.info("[CHAT] Received message: %s", message)
    logger.info("[CHAT] Received history length: %s", len(history))

    try:
        state = await run_chat(conversation_graph, message, history)
    except AppError:
        raise
    except Exception as e:
        logger.exception("[CHAT] Chat request failed")
        if ROLE_ORDER_ERROR in str(e):
            raise UpstreamFormatError() from e
        raise UnclassifiedFailure() from e

    response: Dict[str, Any] = {"message": state.reply or ""}
    if state.meeting is not None:
        response["meeting"] = state.meeting.to_json()
    return response


@router.get("/meetings")
async def list_meetings(store: MeetingStore = Depends(get_meeting_store)) -> Dict[str, Any]:
    return {"meetings": [meeting.to_json() for meeting in store.list()]}


@router.get("/meetings/{meeting_id}")
async def get_meeting(
    meeting_id: str, store: MeetingStore = Depends(get_meeting_store)
) -> Dict[str, Any]:
    return {"meeting": store.get(meeting_id).to_json()}


@router.put("/meetings/{meeting_id}")
async def reschedule_meeting(
    meeting_id: str,
    payload: Any = Body(default=None),
    store: MeetingStore = Depends(get_meeting_store),
) -> Dict[str, Any]:
    # Unknown ids are a 404 whatever the body holds
    store.get(meeting_id)
    changes = parse_reschedule_request(payload)
    meeting = store.update(meeting_id, changes)
    return {
        "message": "Meeting rescheduled successfully",
        "meeting": meeting.to_json(),
    }


@router.delete("/meetings/{meeting_id}")
async def cancel_meeting(
    meeting_id: str, store: MeetingStore = Depends(get_meeting_store)
) -> Dict[str, Any]:
    store.delete(meeting_id)
    return {"message": "Meeting cancelled successfully", "meetingId": meeting_id}
