import asyncio
import atexit
import threading

from flask import Flask, request
from telegram import Update
from telegram.ext import Application

from bot import build_application, setup_commands
from config.settings import (
    ADMIN_ID,
    APP_URL,
    BOT_TOKEN,
    PORT,
    SESSION_TTL_SECONDS,
    WEBHOOK_PATH,
    WELCOME_IMAGE,
    log_configuration,
)
from services.session_store import InMemorySessionStore
from utils.logger import logger

ALIVE = "Nina Clinic bot is running"

app = Flask(__name__)
# shared by every request served by this process
sessions = InMemorySessionStore(ttl=SESSION_TTL_SECONDS)

# One event loop and one initialized Application per process, so getMe runs once
_loop = None
_loop_lock = threading.Lock()
_application_task = None

log_configuration()


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    with _loop_lock:
        if _loop is None:
            _loop = asyncio.new_event_loop()
            threading.Thread(target=_loop.run_forever, name="telegram-updates", daemon=True).start()
    return _loop


def run_on_loop(coro):
    """Run a coroutine on the shared loop and wait for its result."""
    return asyncio.run_coroutine_threadsafe(coro, _get_loop()).result()


async def _start_application() -> Application:
    application = build_application(BOT_TOKEN, sessions, ADMIN_ID, WELCOME_IMAGE)
    await application.initialize()
    logger.info("Telegram application initialized")
    return application


async def get_application() -> Application:
    global _application_task
    if _application_task is None:
        _application_task = asyncio.ensure_future(_start_application())
    try:
        return await _application_task
    except Exception:
        # next request tries again
        _application_task = None
        raise


async def process_update(payload: dict) -> None:
    application = await get_application()
    update = Update.de_json(payload, application.bot)
    await application.process_update(update)


async def _shutdown_application() -> None:
    global _application_task
    task, _application_task = _application_task, None
    if task is not None and task.done() and not task.cancelled() and task.exception() is None:
        await task.result().shutdown()


def shutdown() -> None:
    if _loop is not None:
        run_on_loop(_shutdown_application())


atexit.register(shutdown)


@app.route(WEBHOOK_PATH, methods=["GET", "POST"])
def webhook():
    if request.method == "GET":
        return ALIVE, 200
    if not BOT_TOKEN:
        logger.error("BOT_TOKEN is not set, cannot process the update")
        return "Configuration Error: BOT_TOKEN missing.", 500
    try:
        run_on_loop(process_update(request.get_json(force=True)))
    except Exception as e:
        # Telegram retries anything that is not 200
        logger.error(f"Webhook processing error: {e}", exc_info=True)
        return "OK (Error Handled Internally)", 200
    return "OK", 200


@app.route("/", methods=["GET"])
def index():
    return ALIVE, 200


async def set_webhook() -> None:
    url = f"{APP_URL}{WEBHOOK_PATH}"
    application = build_application(BOT_TOKEN, sessions)
    async with application:
        await application.bot.set_webhook(url=url, allowed_updates=Update.ALL_TYPES)
        await setup_commands(application)
    logger.info(f"Webhook set: {url}")


if __name__ == "__main__":
    if BOT_TOKEN and APP_URL:
        asyncio.run(set_webhook())
    else:
        logger.warning("APP_URL is not set, webhook was not registered")
    app.run(host="0.0.0.0", port=PORT)
