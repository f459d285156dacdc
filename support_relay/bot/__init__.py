"""Admin bot helpers: reply keyboards and callback data."""
from .callbacks import (
    SHORT_TICKET_ID_LENGTH,
    SUPPORT_ANSWER_PREFIX,
    SupportAnswerCallback,
    build_support_answer_token,
    parse_support_answer_token,
    short_ticket_id,
)
from .keyboards import get_support_answer_keyboard

__all__ = [
    "SHORT_TICKET_ID_LENGTH",
    "SUPPORT_ANSWER_PREFIX",
    "SupportAnswerCallback",
    "build_support_answer_token",
    "get_support_answer_keyboard",
    "parse_support_answer_token",
    "short_ticket_id",
]
