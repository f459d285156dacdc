"""Pytest configuration and fixtures"""
import hashlib
import hmac
import json
import os
import uuid
from typing import Any, Callable, Optional
from unittest.mock import AsyncMock, Mock
from urllib.parse import urlencode

import pytest

from support_relay.config import SupportRelayConfig
from support_relay.services.models import Profile, SupportTicket
from support_relay.services.telegram_messaging import Delivered

# Set test environment variables
os.environ.setdefault("TELEGRAM_TOKEN", "test_bot_token")
os.environ.setdefault("ADMIN_BOT_TOKEN", "test_admin_token")
os.environ.setdefault("TELEGRAM_ADMIN_CHAT_ID", "-100123")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")

BOT_TOKEN = "test_bot_token"


def sign_init_data(fields: dict[str, str], bot_token: str = BOT_TOKEN) -> str:
    """Build initData signed the way Telegram does it."""
    data_check_string = "\n".join(f"{key}={fields[key]}" for key in sorted(fields))
    secret_key = hmac.new(b"WebAppData", bot_token.encode(), hashlib.sha256).digest()
    hash_value = hmac.new(secret_key, data_check_string.encode(), hashlib.sha256).hexdigest()
    return urlencode({**fields, "hash": hash_value})


class InMemoryDatabase:
    """Stands in for services.database.Database"""

    def __init__(self, profiles: Optional[list[Profile]] = None):
        self.profiles = {p.telegram_id: p for p in profiles or []}
        self.tickets: dict[str, SupportTicket] = {}

    async def find_profile_by_telegram_id(self, telegram_id: int) -> Optional[Profile]:
        return self.profiles.get(telegram_id)

    async def insert_ticket(self, fields: dict[str, Any]) -> SupportTicket:
        ticket = SupportTicket(id=str(uuid.uuid4()), **fields)
        self.tickets[ticket.id] = ticket
        return ticket

    async def update_ticket(self, ticket_id: str, fields: dict[str, Any]) -> None:
        self.tickets[ticket_id] = self.tickets[ticket_id].model_copy(update=fields)

    async def find_tickets_by_short_id(self, telegram_id: int, short_id: str) -> list[SupportTicket]:
        return [
            t for t in self.tickets.values()
            if t.user_telegram_id == telegram_id and t.id.startswith(short_id)
        ]


@pytest.fixture
def relay_config() -> SupportRelayConfig:
    return SupportRelayConfig(
        telegram_token=BOT_TOKEN,
        admin_bot_token="test_admin_token",
        admin_chat_id=-100123,
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test_key",
    )


@pytest.fixture
def make_init_data() -> Callable[..., str]:
    """Factory for valid initData for a given user"""
    def _make(user_id: int = 123456789, first_name: Optional[str] = "Test",
              username: Optional[str] = "testuser", **extra: str) -> str:
        user = {"id": user_id}
        if first_name is not None:
            user["first_name"] = first_name
        if username is not None:
            user["username"] = username
        fields = {
            "auth_date": "1700000000",
            "query_id": "AAHdF6IQAAAAAN0XohDhrOrc",
            "user": json.dumps(user, separators=(",", ":"), ensure_ascii=False),
            **extra,
        }
        return sign_init_data(fields)
    return _make


@pytest.fixture
def memory_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def mock_messenger():
    """Messenger that always delivers"""
    messenger = Mock()
    messenger.send_message = AsyncMock(return_value=Delivered(message_id=555))
    return messenger


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client with chainable query builder"""
    client = Mock()

    table_mock = Mock()
    table_mock.select.return_value = table_mock
    table_mock.insert.return_value = table_mock
    table_mock.update.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.limit.return_value = table_mock
    table_mock.order.return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=[]))

    client.table.return_value = table_mock

    return client
