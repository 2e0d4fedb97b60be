from dataclasses import dataclass
from typing import Optional

from telegram.helpers import escape_markdown

from config.clinic import ASK_DATETIME
from services.session_store import Session

PLACEHOLDER = "N/A"


@dataclass
class Sender:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None


def escape_markdown_v2(text: Optional[str]) -> str:
    """Escape user input for MarkdownV2; empty values become N/A."""
    if not text:
        return PLACEHOLDER
    return escape_markdown(text, version=2)


def datetime_prompt(year: int) -> str:
    return ASK_DATETIME.format(year=year)


def format_user_summary(session: Session) -> str:
    return (
        "📩 እናመሰግናለን! Here is your booking summary:\n"
        f"👤 Full Name: {session.full_name}\n"
        f"📞 Contact: {session.contact}\n"
        f"🩺 Service: {session.service}\n"
        f"📅 Preferred Date/Time: {session.datetime}\n"
        f"💬 Message: {session.message}\n\n"
        "We will contact you soon."
    )


def format_admin_summary(session: Session, sender: Sender) -> str:
    """Booking card for the administrator chat, rendered with MarkdownV2."""
    first_name = escape_markdown(sender.first_name or "", version=2)
    last_name = escape_markdown(sender.last_name or "", version=2)
    display_name = f"{first_name} {last_name}".strip() or PLACEHOLDER
    return (
        "📩 *New Booking Received*\n"
        f"👤 *Full Name:* {escape_markdown_v2(session.full_name)}\n"
        f"📞 *Contact:* {escape_markdown_v2(session.contact)}\n"
        f"🩺 *Service:* {escape_markdown_v2(session.service)}\n"
        f"📅 *Preferred Date/Time:* {escape_markdown_v2(session.datetime)}\n"
        f"💬 *Message:* {escape_markdown_v2(session.message)}\n\n"
        f"• From Telegram: {display_name} \\(@{escape_markdown_v2(sender.username)}\\)"
    )
