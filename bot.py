from typing import Optional

from telegram import BotCommand
from telegram.ext import Application, CallbackQueryHandler, CommandHandler, MessageHandler, filters

from config.clinic import CANCEL_BOOKING, COMMANDS, SERVICE_PREFIX, START_BOOKING
from handlers.callbacks import cancel_booking, select_service, start_booking
from handlers.commands import cancel_command, help_command, start
from handlers.errors import error_handler
from handlers.messages import handle_message
from services.booking_flow import BookingFlow
from services.messenger import TelegramMessenger
from services.session_store import SessionStore


async def setup_commands(application: Application) -> None:
    await application.bot.set_my_commands([BotCommand(name, description) for name, description in COMMANDS])


def build_application(token: str, store: SessionStore, admin_chat_id: Optional[int] = None,
                      welcome_image: Optional[str] = None, post_init=None) -> Application:
    builder = Application.builder().token(token)
    if post_init is not None:
        builder = builder.post_init(post_init)
    application = builder.build()

    application.bot_data["booking_flow"] = BookingFlow(
        store,
        TelegramMessenger(application.bot),
        admin_chat_id=admin_chat_id,
        welcome_image=welcome_image,
    )

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("cancel", cancel_command))
    application.add_handler(CallbackQueryHandler(start_booking, pattern=f"^{START_BOOKING}$"))
    application.add_handler(CallbackQueryHandler(cancel_booking, pattern=f"^{CANCEL_BOOKING}$"))
    application.add_handler(CallbackQueryHandler(select_service, pattern=f"^{SERVICE_PREFIX}"))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))
    application.add_error_handler(error_handler)
    return application
