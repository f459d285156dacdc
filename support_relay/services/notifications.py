"""
Operator Notifications

Formats new support questions for the admin chat.
"""

import html
from dataclasses import dataclass
from typing import Optional

from aiogram.types import InlineKeyboardMarkup

from support_relay.auth import TelegramUser
from support_relay.bot.keyboards import get_support_answer_keyboard
from support_relay.services.models import Profile, SupportTicket

DEFAULT_USER_NAME = "User"


@dataclass(frozen=True)
class OperatorNotification:
    text: str
    keyboard: InlineKeyboardMarkup


def resolve_display_name(user: TelegramUser, profile: Optional[Profile]) -> str:
    """Profile name first, then the Mini App name, then a placeholder."""
    if profile and profile.first_name:
        return profile.first_name
    return user.first_name or DEFAULT_USER_NAME


def resolve_user_handle(user: TelegramUser, profile: Optional[Profile]) -> str:
    """@username if known, otherwise the Telegram ID."""
    username = user.username or (profile.username if profile else None)
    return f"@{username}" if username else f"ID:{user.id}"


def build_operator_notification(
    ticket: SupportTicket,
    user: TelegramUser,
    profile: Optional[Profile] = None,
) -> OperatorNotification:
    """
    Build the admin chat message for a new question.

    The question goes in full; Telegram rejects texts over 4096 chars,
    which leaves the ticket undelivered rather than cut.
    """
    name = html.escape(resolve_display_name(user, profile))
    handle = html.escape(resolve_user_handle(user, profile))

    text = (
        "❓ <b>New support question</b>\n\n"
        f"👤 <b>From:</b> {name} ({handle})\n"
        f"🆔 <b>Telegram ID:</b> {user.id}\n\n"
        "📝 <b>Question:</b>\n"
        f"{html.escape(ticket.question, quote=False)}"
    )
    return OperatorNotification(
        text=text,
        keyboard=get_support_answer_keyboard(user.id, ticket.id),
    )
