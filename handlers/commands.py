from telegram import Update
from telegram.ext import ContextTypes

from config.clinic import HELP_TEXT
from services.booking_flow import BookingFlow


def get_flow(context: ContextTypes.DEFAULT_TYPE) -> BookingFlow:
    return context.bot_data["booking_flow"]


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await get_flow(context).welcome(update.effective_chat.id)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.effective_message.reply_text(HELP_TEXT)


async def cancel_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await get_flow(context).cancel(update.effective_chat.id)
