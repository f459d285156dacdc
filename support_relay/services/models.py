"""Database Models - Pydantic models for relay entities."""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TicketStatus(str, Enum):
    """
    Support question lifecycle.

    Flow:
        pending -> answered

    - pending: saved, waiting for an operator reply
    - answered: operator replied (set by the reply flow) (final)
    """
    PENDING = "pending"
    ANSWERED = "answered"


class Profile(BaseModel):
    """Known user profile (``profiles`` table)."""
    model_config = ConfigDict(extra="ignore")

    id: str
    telegram_id: Optional[int] = None
    first_name: Optional[str] = None
    username: Optional[str] = None


class SupportTicket(BaseModel):
    """Support question (``support_questions`` table)."""
    model_config = ConfigDict(extra="ignore")

    id: str
    user_telegram_id: int
    user_profile_id: Optional[str] = None
    question: str
    status: TicketStatus = TicketStatus.PENDING
    admin_message_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def short_id(self) -> str:
        from support_relay.bot.callbacks import short_ticket_id
        return short_ticket_id(self.id)
