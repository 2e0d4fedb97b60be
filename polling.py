import signal
import sys

from telegram import Update

from bot import build_application, setup_commands
from config.settings import ADMIN_ID, BOT_TOKEN, SESSION_TTL_SECONDS, WELCOME_IMAGE, log_configuration
from services.session_store import InMemorySessionStore
from utils.logger import logger


def main() -> None:
    if not log_configuration():
        sys.exit(1)

    application = build_application(
        BOT_TOKEN,
        InMemorySessionStore(ttl=SESSION_TTL_SECONDS),
        ADMIN_ID,
        WELCOME_IMAGE,
        post_init=setup_commands,
    )
    logger.info("Bot is running with long polling")
    application.run_polling(
        allowed_updates=Update.ALL_TYPES,
        stop_signals=(signal.SIGINT, signal.SIGTERM),
    )
    logger.info("Bot stopped")


if __name__ == "__main__":
    main()
