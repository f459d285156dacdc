"""Tests for database models"""
import pytest
from pydantic import ValidationError

from support_relay.services.models import Profile, SupportTicket, TicketStatus


def test_support_ticket_from_row():
    ticket = SupportTicket(**{
        "id": "a1b2c3d4-5e6f-4a7b-8c9d-0e1f2a3b4c5d",
        "user_telegram_id": 7,
        "question": "Help",
        "status": "pending",
        "admin_message_id": 555,
        "unknown_column": "ignored",
    })

    assert ticket.status == TicketStatus.PENDING
    assert ticket.admin_message_id == 555
    assert ticket.user_profile_id is None
    assert ticket.short_id == "a1b2c3d4"


def test_support_ticket_defaults_pending():
    ticket = SupportTicket(id="t-1", user_telegram_id=7, question="Help")

    assert ticket.status == TicketStatus.PENDING
    assert ticket.admin_message_id is None


def test_support_ticket_rejects_unknown_status():
    with pytest.raises(ValidationError):
        SupportTicket(id="t-1", user_telegram_id=7, question="Help", status="closed")


def test_ticket_status_values():
    assert TicketStatus.PENDING.value == "pending"
    assert TicketStatus.ANSWERED.value == "answered"


def test_profile_optional_fields():
    profile = Profile(id="p-1")

    assert profile.first_name is None
    assert profile.username is None
