"""Texts, buttons and the service list shown by the bot.

All user-facing text is Amharic followed by English.
"""
from collections import namedtuple

Service = namedtuple("Service", ["key", "button", "label"])

SERVICES = (
    Service("service_checkup", "ምርመራ እና ምክር", "የጤና ምርመራ እና ምክር / Check-up & Advice"),
    Service("service_pediatric", "የህፃናት እንክብካቤ", "የህፃናት እና አባላት እንክብካቤ / Pediatric & Family Care"),
    Service("service_women", "የሴቶች ጤና", "የሴቶች ጤና / Women's Health"),
    Service("service_pain", "የህመም መቆጣጠሪያ", "የህመም መቆጣጠሪያ / Pain Management"),
    Service("service_lab", "የምርመራ ክፍል", "የምርመራ ክፍል / Lab Services"),
)
SERVICES_BY_KEY = {s.key: s for s in SERVICES}
SERVICE_PREFIX = "service_"

START_BOOKING = "start_booking"
CANCEL_BOOKING = "cancel_booking"

MAP_URL = "https://maps.app.goo.gl/sCkAb8ghcHpZmQ6G8"

WELCOME_TEXT = (
    "👋 እንኳን ወደ *Nina Medium Clinic* በደህና መጡ!\n"
    "Welcome to *Nina Clinic* 💖\n\n"
    "🩺 እኛ የምናስገባቸው አገልግሎቶች | Our Services:\n"
    + "".join(f"• {s.label}\n" for s in SERVICES)
    + f"\n📍 ቦታ / Location: [Click here to see map]({MAP_URL})\n\n"
    "📅 ለማውደድ እባክዎ ቀጥሉ።\n"
    "To book an appointment, press the button below."
)

CHOOSE_OPTION = "እባክዎ አንዱን ይምረጡ / Please choose an option:"
START_BUTTON = "ለመጀመር / Start"
CANCEL_BUTTON = "ተወው / Cancel"
START_AGAIN_BUTTON = "🔁 እንደገና ጀምር / Start Again"

ASK_NAME = "👤 ሙሉ ስምዎን ያስገቡ። Please enter your Full Name:"
ASK_CONTACT = "📞 እባክዎ ስልክ ቁጥርዎን ወይም ኢሜይልዎን ያስገቡ / Please enter your Contact (phone or email):"
ASK_SERVICE = "🩺 የሚፈልጉትን አገልግሎት ይምረጡ / Please choose the service:"
ASK_DATETIME = "📅 እባክዎ የቀንና ሰዓት ያስገቡ / Enter preferred Date & Time (e.g., {year}-10-27 14:00):"
ASK_MESSAGE = '💬 ስለራስዎ ከፈለጉ መልእክት ያስገቡ / Any additional message? (type "none" if none):'

USE_SERVICE_BUTTONS = "Please press one of the service buttons above. / እባክዎ ከላይ ያሉትን የአገልግሎት ቁልፎች ይጫኑ።"
SEND_START = "Send /start to begin the booking process. / እባክዎ /start ይጫኑ።"
WRONG_STEP = "Session expired or in wrong step. Send /start to begin. / እባክዎ /start ይጫኑ።"
UNEXPECTED_STEP = "Unexpected step. Send /start to begin again. / እባክዎ /start ይጫኑ።"
HANDLER_ERROR = "⚠️ An error occurred. Please send /start and try again. / እባክዎ /start ይጫኑ።"

CANCELLED_NOTICE = "❌ ሂደቱ ተሰርዟል። Booking cancelled."
CANCELLED_REPLY = "Booking cancelled. Send /start to begin again. / እባክዎ /start ይጫኑ።"

HELP_TEXT = (
    "/start - ምዝገባ ለመጀመር / Start a new booking\n"
    "/cancel - ምዝገባውን ለመሰረዝ / Cancel the current booking\n"
    "/help - እርዳታ / Show this message"
)

COMMANDS = (
    ("start", "Start a booking / ምዝገባ ይጀምሩ"),
    ("cancel", "Cancel the booking / ይሰርዙ"),
    ("help", "Help / እርዳታ"),
)
