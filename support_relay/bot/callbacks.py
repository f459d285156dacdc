"""Callback data for operator reply buttons.

The payload is ``support_answer:<telegram_id>:<short_ticket_id>`` so the
admin bot can route a reply without looking up the notification message.
Use ``SupportAnswerCallback.filter()`` in an aiogram router to match it.
"""
import re
from typing import Optional

from aiogram.filters.callback_data import CallbackData

SUPPORT_ANSWER_PREFIX = "support_answer"
SHORT_TICKET_ID_LENGTH = 8
_SHORT_TICKET_ID_RE = re.compile(rf"[0-9a-f]{{{SHORT_TICKET_ID_LENGTH}}}")


class SupportAnswerCallback(CallbackData, prefix=SUPPORT_ANSWER_PREFIX):
    """Correlation token: which user and which ticket a reply belongs to."""
    telegram_id: int
    ticket: str


def short_ticket_id(ticket_id: str) -> str:
    """First 8 characters of a ticket UUID."""
    return str(ticket_id)[:SHORT_TICKET_ID_LENGTH]


def build_support_answer_token(telegram_id: int, ticket_id: str) -> str:
    """Pack a correlation token for the ticket (full or short ID accepted)."""
    return SupportAnswerCallback(telegram_id=telegram_id, ticket=short_ticket_id(ticket_id)).pack()


def parse_support_answer_token(data: str) -> Optional[SupportAnswerCallback]:
    """Unpack a correlation token, or None if it isn't one.

    The ticket part must be a full 8-char hex prefix; anything shorter
    would match unrelated tickets of the same user.
    """
    if not data or not data.startswith(f"{SUPPORT_ANSWER_PREFIX}:"):
        return None
    try:
        callback = SupportAnswerCallback.unpack(data)
    except (TypeError, ValueError):
        return None
    if not _SHORT_TICKET_ID_RE.fullmatch(callback.ticket):
        return None
    return callback
