import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional


class Step(Enum):
    AWAITING_NAME = "name"
    AWAITING_CONTACT = "contact"
    AWAITING_SERVICE = "service"
    AWAITING_DATETIME = "datetime"
    AWAITING_MESSAGE = "message"
    COMPLETE = "done"


STEP_ORDER = [
    Step.AWAITING_NAME,
    Step.AWAITING_CONTACT,
    Step.AWAITING_SERVICE,
    Step.AWAITING_DATETIME,
    Step.AWAITING_MESSAGE,
    Step.COMPLETE,
]

# Field written when a session leaves the step
STEP_FIELDS = {
    Step.AWAITING_NAME: "full_name",
    Step.AWAITING_CONTACT: "contact",
    Step.AWAITING_SERVICE: "service",
    Step.AWAITING_DATETIME: "datetime",
    Step.AWAITING_MESSAGE: "message",
}


@dataclass
class Session:
    """Booking progress of one chat."""

    step: Step = Step.AWAITING_NAME
    full_name: Optional[str] = None
    contact: Optional[str] = None
    service: Optional[str] = None
    datetime: Optional[str] = None
    message: Optional[str] = None
    updated_at: float = field(default=0.0, compare=False)

    def record(self, value: str) -> Step:
        """Store the answer for the current step and move to the next one."""
        if self.step is Step.COMPLETE:
            raise ValueError("session is already complete")
        setattr(self, STEP_FIELDS[self.step], value)
        self.step = STEP_ORDER[STEP_ORDER.index(self.step) + 1]
        return self.step

    def filled_fields(self) -> List[str]:
        return [name for name in STEP_FIELDS.values() if getattr(self, name) is not None]


class SessionStore:
    """Storage interface used by the booking flow."""

    def get(self, chat_id: int) -> Optional[Session]:
        raise NotImplementedError

    def set(self, chat_id: int, session: Session) -> None:
        raise NotImplementedError

    def delete(self, chat_id: int) -> None:
        raise NotImplementedError


class InMemorySessionStore(SessionStore):
    """Process-local sessions with an idle time-to-live.

    Nothing survives a restart. With ``ttl=None`` sessions never expire.
    """

    def __init__(self, ttl: Optional[float] = 1800, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.clock = clock
        self._sessions: Dict[int, Session] = {}

    def _expired(self, session: Session, now: float) -> bool:
        return self.ttl is not None and now - session.updated_at > self.ttl

    def get(self, chat_id: int) -> Optional[Session]:
        session = self._sessions.get(chat_id)
        if session is None:
            return None
        if self._expired(session, self.clock()):
            del self._sessions[chat_id]
            return None
        return session

    def set(self, chat_id: int, session: Session) -> None:
        session.updated_at = self.clock()
        self._sessions[chat_id] = session
        self.purge_expired()

    def delete(self, chat_id: int) -> None:
        self._sessions.pop(chat_id, None)

    def purge_expired(self) -> int:
        now = self.clock()
        stale = [cid for cid, s in self._sessions.items() if self._expired(s, now)]
        for chat_id in stale:
            del self._sessions[chat_id]
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
