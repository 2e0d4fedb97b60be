"""Shared fixtures: a recording messenger and a flow wired to it."""

import pytest

from services.booking_flow import BookingFlow
from services.formatter import Sender
from services.messenger import DeliveryError, Messenger
from services.session_store import InMemorySessionStore

CHAT_ID = 1001
ADMIN_CHAT_ID = 42


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingMessenger(Messenger):
    """Keeps every outbound call in ``sent``; can be told to fail."""

    def __init__(self):
        self.sent = []
        self.failing_chats = set()
        self.fail_edits = False
        self.fail_photos = False

    async def send_text(self, chat_id, text, buttons=None, parse_mode=None):
        if chat_id in self.failing_chats:
            raise DeliveryError(f"chat {chat_id} unreachable")
        self.sent.append(("text", chat_id, text, buttons, parse_mode))

    async def send_photo(self, chat_id, path, caption, parse_mode=None):
        if self.fail_photos:
            raise DeliveryError("photo rejected")
        self.sent.append(("photo", chat_id, caption, path, parse_mode))

    async def edit_text(self, chat_id, message_id, text):
        if self.fail_edits:
            raise DeliveryError("message can't be edited")
        self.sent.append(("edit", chat_id, text, message_id, None))

    def texts_to(self, chat_id):
        return [entry[2] for entry in self.sent if entry[1] == chat_id]

    @property
    def last_text(self):
        return self.sent[-1][2]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemorySessionStore(ttl=1800, clock=clock)


@pytest.fixture
def messenger():
    return RecordingMessenger()


@pytest.fixture
def flow(store, messenger):
    return BookingFlow(store, messenger, admin_chat_id=ADMIN_CHAT_ID)


@pytest.fixture
def sender():
    return Sender(first_name="Abebe", last_name="Kebede", username="abebe_k")
