import os
from typing import Optional

from dotenv import load_dotenv

from utils.logger import logger

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def parse_chat_id(raw: Optional[str]) -> Optional[int]:
    """Chat ids are plain integers; anything else counts as not configured."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning(f"ADMIN_ID is not a valid chat id: {raw!r}")
        return None


def parse_ttl(raw: Optional[str], default: int = 1800) -> Optional[int]:
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"SESSION_TTL_SECONDS is not a number of seconds: {raw!r}, using {default}")
        return default
    # 0 disables expiry
    return value if value > 0 else None


BOT_TOKEN = os.getenv("BOT_TOKEN")
ADMIN_ID = parse_chat_id(os.getenv("ADMIN_ID"))
APP_URL = os.getenv("APP_URL")
WEBHOOK_PATH = os.getenv("WEBHOOK_PATH", "/api")
PORT = int(os.getenv("PORT", "5000"))
WELCOME_IMAGE = os.getenv("WELCOME_IMAGE", os.path.join(BASE_DIR, "nina.jpg"))
SESSION_TTL_SECONDS = parse_ttl(os.getenv("SESSION_TTL_SECONDS"))


def log_configuration(token: Optional[str] = None, admin_id: Optional[int] = None) -> bool:
    """Report missing settings. Returns False when the bot cannot work at all."""
    token = BOT_TOKEN if token is None else token
    admin_id = ADMIN_ID if admin_id is None else admin_id
    if not token:
        logger.error("BOT_TOKEN is missing. Get one from @BotFather and add it to .env")
    if not admin_id:
        logger.warning("ADMIN_ID is missing, the admin will not receive booking messages")
        logger.warning("Get your user id from @userinfobot and add it to .env")
    else:
        logger.info(f"Admin ID is set to: {admin_id}")
        logger.info("Make sure this admin has started a chat with the bot")
    return bool(token)
