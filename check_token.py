"""Verify BOT_TOKEN against the Bot API (getMe)."""
import asyncio
import sys

import telegram
from telegram.error import TelegramError

from config.settings import BOT_TOKEN
from utils.logger import logger


async def fetch_bot_info(token: str) -> telegram.User:
    async with telegram.Bot(token) as bot:
        return bot.bot


def main() -> None:
    if not BOT_TOKEN:
        logger.error("No BOT_TOKEN found")
        sys.exit(1)
    try:
        me = asyncio.run(fetch_bot_info(BOT_TOKEN))
    except TelegramError as e:
        logger.error(f"getMe failed: {e}")
        sys.exit(1)
    logger.info(f"Bot info: id={me.id} username=@{me.username} name={me.first_name}")


if __name__ == "__main__":
    main()
