import logging

from app.meetings.confirmation import confirmation_message, summarize_meeting
from app.meetings.extractor import parse_meeting_request, strip_meeting_blocks
from app.meetings.store import MeetingStore
from app.nlu.generator import ChatClient
from app.nlu.history import normalize_history
from app.state import ChatState

logger = logging.getLogger(__name__)


# Nodes --------------------------------


async def normalize_node(state: ChatState) -> dict:
    history = normalize_history(state.raw_history)
    logger.info(
        "[NORMALIZE_NODE] History turns: received=%s kept=%s",
        len(state.raw_history),
        len(history),
    )
    return {"history": history}


def make_generate_node(chat_client: ChatClient):
    async def generate_node(state: ChatState) -> dict:
        logger.info("[GENERATE_NODE] Sending message: %s", state.message)
        reply = await chat_client.send_message(state.history, state.message)
        logger.info("[GENERATE_NODE] Model reply: %s", reply)
        return {"reply": reply}

    return generate_node


async def extract_node(state: ChatState) -> dict:
    meeting_request = parse_meeting_request(state.reply)
    if meeting_request is None:
        logger.info("[EXTRACT_NODE] No meeting block in reply")
    return {"meeting_request": meeting_request}


def make_schedule_node(store: MeetingStore):
    async def schedule_node(state: ChatState) -> dict:
        meeting_id = store.create(state.meeting_request)
        meeting = store.get(meeting_id)
        summary = summarize_meeting(meeting)

        reply = strip_meeting_blocks(state.reply)
        reply = f"{reply}\n\n{confirmation_message(summary)}"

        logger.info(
            "[SCHEDULE_NODE] Meeting scheduled: id=%s type=%s for=%s",
            summary.id,
            summary.meeting_type,
            summary.scheduled_for,
        )
        return {"reply": reply, "meeting": summary}

    return schedule_node


# Router ---------------------------------------------------------------------------


def route_after_extract(state: ChatState) -> str:
    return "schedule" if state.meeting_request is not None else "done"
