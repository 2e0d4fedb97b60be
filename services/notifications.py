from typing import Optional

from telegram.constants import ParseMode

from services.messenger import Messenger
from utils.logger import logger


async def notify_admin(messenger: Messenger, admin_chat_id: Optional[int], text: str) -> bool:
    """Send a booking card to the administrator. Never raises."""
    if not admin_chat_id:
        logger.warning("No ADMIN_ID set, booking was NOT sent to admin")
        return False
    try:
        await messenger.send_text(admin_chat_id, text, parse_mode=ParseMode.MARKDOWN_V2)
    except Exception as e:
        logger.error(f"Failed to send booking to admin {admin_chat_id}: {e}", exc_info=True)
        return False
    logger.info(f"Sent booking to admin {admin_chat_id}")
    return True
