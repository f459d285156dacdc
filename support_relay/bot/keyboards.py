"""Telegram Inline Keyboards for the admin bot"""
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from .callbacks import build_support_answer_token

BTN_SUPPORT_ANSWER = "💬 Reply"


def get_support_answer_keyboard(telegram_id: int, ticket_id: str) -> InlineKeyboardMarkup:
    """Single reply button carrying the correlation token"""
    return InlineKeyboardMarkup(inline_keyboard=[
        [InlineKeyboardButton(
            text=BTN_SUPPORT_ANSWER,
            callback_data=build_support_answer_token(telegram_id, ticket_id)
        )]
    ])
