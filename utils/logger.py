import logging
import os

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
)
# httpx logs every Bot API request, including the token in the URL
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger("clinic_bot")
