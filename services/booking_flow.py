"""Booking conversation: five questions asked in a fixed order.

The flow knows nothing about Telegram updates. Transports call it with chat
ids and plain text, and it answers through a :class:`Messenger`.
"""
import os
from datetime import datetime
from typing import Optional

from telegram.constants import ParseMode

from config import clinic
from services.formatter import Sender, datetime_prompt, format_admin_summary, format_user_summary
from services.messenger import DeliveryError, Messenger
from services.notifications import notify_admin
from services.session_store import Session, SessionStore, Step
from utils.logger import logger

SERVICE_BUTTONS = [[(s.button, s.key)] for s in clinic.SERVICES] + [
    [(clinic.CANCEL_BUTTON, clinic.CANCEL_BOOKING)]
]
START_CANCEL_BUTTONS = [
    [(clinic.START_BUTTON, clinic.START_BOOKING)],
    [(clinic.CANCEL_BUTTON, clinic.CANCEL_BOOKING)],
]
START_AGAIN_BUTTONS = [[(clinic.START_AGAIN_BUTTON, clinic.START_BOOKING)]]


def check_step_table(table) -> None:
    missing = [step for step in Step if step is not Step.COMPLETE and step not in table]
    if missing:
        raise RuntimeError(f"no text handler for {missing}")


class BookingFlow:
    def __init__(self, store: SessionStore, messenger: Messenger,
                 admin_chat_id: Optional[int] = None, welcome_image: Optional[str] = None):
        self.store = store
        self.messenger = messenger
        self.admin_chat_id = admin_chat_id
        self.welcome_image = welcome_image
        self._text_steps = {
            Step.AWAITING_NAME: self._on_name,
            Step.AWAITING_CONTACT: self._on_contact,
            Step.AWAITING_SERVICE: self._on_service_text,
            Step.AWAITING_DATETIME: self._on_datetime,
            Step.AWAITING_MESSAGE: self._on_message,
        }
        check_step_table(self._text_steps)

    async def _edit_or_send(self, chat_id: int, message_id: Optional[int], text: str) -> None:
        if message_id is not None:
            try:
                await self.messenger.edit_text(chat_id, message_id, text)
                return
            except DeliveryError as e:
                logger.warning(f"Edit message failed in chat {chat_id}: {e}")
        await self.messenger.send_text(chat_id, text)

    async def welcome(self, chat_id: int) -> None:
        self.store.delete(chat_id)
        await self._send_welcome(chat_id)
        await self.messenger.send_text(chat_id, clinic.CHOOSE_OPTION, buttons=START_CANCEL_BUTTONS)

    async def _send_welcome(self, chat_id: int) -> None:
        if self.welcome_image and os.path.exists(self.welcome_image):
            try:
                await self.messenger.send_photo(
                    chat_id, self.welcome_image, clinic.WELCOME_TEXT, parse_mode=ParseMode.MARKDOWN
                )
                return
            except DeliveryError as e:
                logger.error(f"Error sending welcome photo: {e}")
        else:
            logger.warning(f"Welcome image {self.welcome_image} not found, sending text only")
        await self.messenger.send_text(chat_id, clinic.WELCOME_TEXT, parse_mode=ParseMode.MARKDOWN)

    async def begin(self, chat_id: int, message_id: Optional[int] = None) -> None:
        self.store.set(chat_id, Session())
        await self._edit_or_send(chat_id, message_id, clinic.ASK_NAME)

    async def cancel(self, chat_id: int, message_id: Optional[int] = None) -> None:
        self.store.delete(chat_id)
        if message_id is not None:
            try:
                await self.messenger.edit_text(chat_id, message_id, clinic.CANCELLED_NOTICE)
            except DeliveryError as e:
                logger.warning(f"Edit message failed (cancel) in chat {chat_id}: {e}")
        await self.messenger.send_text(chat_id, clinic.CANCELLED_REPLY)

    async def select_service(self, chat_id: int, service_key: str, message_id: Optional[int] = None) -> None:
        session = self.store.get(chat_id)
        service = clinic.SERVICES_BY_KEY.get(service_key)
        if session is None or session.step is not Step.AWAITING_SERVICE or service is None:
            await self.messenger.send_text(chat_id, clinic.WRONG_STEP)
            return
        session.record(service.label)
        self.store.set(chat_id, session)
        await self._edit_or_send(chat_id, message_id, datetime_prompt(datetime.now().year))

    async def handle_text(self, chat_id: int, text: Optional[str], sender: Sender) -> None:
        text = (text or "").strip()
        if text.startswith("/"):
            return
        session = self.store.get(chat_id)
        if session is None:
            await self.messenger.send_text(chat_id, clinic.SEND_START)
            return

        handler = self._text_steps.get(session.step)
        if handler is None:
            self.store.delete(chat_id)
            await self.messenger.send_text(chat_id, clinic.UNEXPECTED_STEP)
            return
        try:
            await handler(chat_id, session, text, sender)
        except Exception:
            logger.error(f"Handler error in chat {chat_id} at step {session.step.name}", exc_info=True)
            self.store.delete(chat_id)
            await self.messenger.send_text(chat_id, clinic.HANDLER_ERROR)

    async def _on_name(self, chat_id, session, text, sender):
        session.record(text)
        self.store.set(chat_id, session)
        await self.messenger.send_text(chat_id, clinic.ASK_CONTACT)

    async def _on_contact(self, chat_id, session, text, sender):
        session.record(text)
        self.store.set(chat_id, session)
        await self.messenger.send_text(chat_id, clinic.ASK_SERVICE, buttons=SERVICE_BUTTONS)

    async def _on_service_text(self, chat_id, session, text, sender):
        self.store.set(chat_id, session)
        await self.messenger.send_text(chat_id, clinic.USE_SERVICE_BUTTONS)

    async def _on_datetime(self, chat_id, session, text, sender):
        session.record(text)
        self.store.set(chat_id, session)
        await self.messenger.send_text(chat_id, clinic.ASK_MESSAGE)

    async def _on_message(self, chat_id, session, text, sender):
        session.record(text)
        # user summary goes out first, admin delivery cannot undo it
        await self.messenger.send_text(chat_id, format_user_summary(session), buttons=START_AGAIN_BUTTONS)
        await notify_admin(self.messenger, self.admin_chat_id, format_admin_summary(session, sender))
        self.store.delete(chat_id)
        logger.info(f"Booking completed for chat {chat_id}")
