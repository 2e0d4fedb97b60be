from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from handlers.commands import get_flow
from utils.logger import logger


async def _answer(update: Update) -> None:
    # stops the spinner on the pressed button
    try:
        await update.callback_query.answer()
    except TelegramError as e:
        logger.warning(f"Could not answer callback query: {e}")


async def start_booking(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await _answer(update)
    await get_flow(context).begin(update.effective_chat.id, update.callback_query.message.message_id)


async def cancel_booking(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await _answer(update)
    await get_flow(context).cancel(update.effective_chat.id, update.callback_query.message.message_id)


async def select_service(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.callback_query
    await _answer(update)
    await get_flow(context).select_service(update.effective_chat.id, query.data, query.message.message_id)
