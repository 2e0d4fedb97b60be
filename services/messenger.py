from typing import List, Optional, Sequence, Tuple

import telegram
from telegram import InlineKeyboardButton, InlineKeyboardMarkup
from telegram.error import TelegramError

# Rows of (label, callback_data)
Buttons = Sequence[Sequence[Tuple[str, str]]]


class DeliveryError(Exception):
    """An outbound message could not be delivered."""


class Messenger:
    """Outbound side of a transport. The booking flow only talks to this."""

    async def send_text(self, chat_id: int, text: str, buttons: Optional[Buttons] = None,
                        parse_mode: Optional[str] = None) -> None:
        raise NotImplementedError

    async def send_photo(self, chat_id: int, path: str, caption: str,
                         parse_mode: Optional[str] = None) -> None:
        raise NotImplementedError

    async def edit_text(self, chat_id: int, message_id: int, text: str) -> None:
        raise NotImplementedError


def build_keyboard(buttons: Buttons) -> InlineKeyboardMarkup:
    rows: List[List[InlineKeyboardButton]] = [
        [InlineKeyboardButton(label, callback_data=data) for label, data in row]
        for row in buttons
    ]
    return InlineKeyboardMarkup(rows)


class TelegramMessenger(Messenger):
    def __init__(self, bot: telegram.Bot):
        self.bot = bot

    async def send_text(self, chat_id, text, buttons=None, parse_mode=None):
        markup = build_keyboard(buttons) if buttons else None
        try:
            await self.bot.send_message(chat_id, text, reply_markup=markup, parse_mode=parse_mode)
        except TelegramError as e:
            raise DeliveryError(f"send_message to {chat_id} failed: {e}") from e

    async def send_photo(self, chat_id, path, caption, parse_mode=None):
        try:
            with open(path, "rb") as photo:
                await self.bot.send_photo(chat_id, photo, caption=caption, parse_mode=parse_mode)
        except (TelegramError, OSError) as e:
            raise DeliveryError(f"send_photo to {chat_id} failed: {e}") from e

    async def edit_text(self, chat_id, message_id, text):
        try:
            await self.bot.edit_message_text(text, chat_id=chat_id, message_id=message_id)
        except TelegramError as e:
            raise DeliveryError(f"edit_message_text in {chat_id} failed: {e}") from e
