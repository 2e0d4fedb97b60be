from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import logger


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log anything that escaped the handlers."""
    update_type = "unknown"
    if isinstance(update, Update):
        if update.callback_query:
            update_type = "callback_query"
        elif update.message:
            update_type = "message"
    logger.error(f"Bot error for {update_type} update", exc_info=context.error)
