"""
Supabase Database Service

Flat API over the relay repositories.

Usage:
    db = await Database.create(config)
    profile = await db.find_profile_by_telegram_id(123)
"""

from typing import Any

from supabase._async.client import AsyncClient
from supabase._async.client import create_client as acreate_client

from support_relay.config import SupportRelayConfig
from support_relay.services.models import Profile, SupportTicket
from support_relay.services.repositories import ProfileRepository, TicketRepository


class Database:
    """
    Supabase persistence for profiles and support questions.

    Must be built with the async factory ``Database.create()``.
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        self._profiles_repo = ProfileRepository(client)
        self._tickets_repo = TicketRepository(client)

    @classmethod
    async def create(cls, config: SupportRelayConfig) -> "Database":
        """Create the async Supabase client and wire repositories."""
        client = await acreate_client(config.supabase_url, config.supabase_service_role_key)
        return cls(client)

    # ==================== PROFILES ====================

    async def find_profile_by_telegram_id(self, telegram_id: int) -> Profile | None:
        return await self._profiles_repo.get_by_telegram_id(telegram_id)

    # ==================== SUPPORT QUESTIONS ====================

    async def insert_ticket(self, fields: dict[str, Any]) -> SupportTicket:
        return await self._tickets_repo.create(fields)

    async def update_ticket(self, ticket_id: str, fields: dict[str, Any]) -> None:
        await self._tickets_repo.update(ticket_id, fields)

    async def get_ticket(self, ticket_id: str) -> SupportTicket | None:
        return await self._tickets_repo.get_by_id(ticket_id)

    async def find_tickets_by_short_id(self, telegram_id: int, short_id: str) -> list[SupportTicket]:
        return await self._tickets_repo.list_by_user_and_short_id(telegram_id, short_id)
