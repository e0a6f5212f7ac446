import os

# Settings are read at import time; give them a key before anything imports app.config
os.environ.setdefault("LLM_PROVIDER", "gemini")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("LOG_FILE_PATH", "logs/test.log")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.meetings.store import MeetingStore
from app.nlu.generator import ChatClient
from app.nlu.prompts import SYSTEM_PROMPT


MEETING_REPLY = (
    "Great, let's get that booked!\n"
    "[SCHEDULE_MEETING]\n"
    "Name: Jane\n"
    "Email: jane@x.com\n"
    "Preferred Date: next Tuesday\n"
    "Preferred Time: 3pm\n"
    "Meeting Type: Demo\n"
    "[/SCHEDULE_MEETING]"
)


class FakeChatClient(ChatClient):
    """Records calls and returns a canned reply (or raises `error`)."""

    def __init__(self, reply: str = "Happy to help! What does your team use today?"):
        super().__init__("fake-model")
        self.reply = reply
        self.error = None
        self.calls = []

    async def send_message(self, history, message, system_prompt=SYSTEM_PROMPT):
        self.calls.append(
            {"history": history, "message": message, "system_prompt": system_prompt}
        )
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def store():
    return MeetingStore()


@pytest.fixture
def chat_client():
    return FakeChatClient()


@pytest.fixture
def client(store, chat_client):
    app = create_app(chat_client=chat_client, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def meeting_reply():
    return MEETING_REPLY
