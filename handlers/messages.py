from typing import Optional

from telegram import Update, User
from telegram.ext import ContextTypes

from handlers.commands import get_flow
from services.formatter import Sender


def sender_from_user(user: Optional[User]) -> Sender:
    if user is None:
        return Sender()
    return Sender(first_name=user.first_name, last_name=user.last_name, username=user.username)


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    await get_flow(context).handle_text(
        update.effective_chat.id, message.text, sender_from_user(update.effective_user)
    )
