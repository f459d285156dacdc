"""Ticket Repository - support question CRUD operations.

All methods use async/await with supabase-py v2.
"""

from typing import Any

from support_relay.services.models import SupportTicket

from .base import BaseRepository

TICKETS_TABLE = "support_questions"


class TicketRepository(BaseRepository):
    """Support question database operations."""

    async def create(self, fields: dict[str, Any]) -> SupportTicket:
        """Insert a ticket and return the stored row."""
        result = await self.client.table(TICKETS_TABLE).insert(fields).execute()
        if not result.data:
            raise RuntimeError("Insert into support_questions returned no rows")
        return SupportTicket(**result.data[0])

    async def update(self, ticket_id: str, fields: dict[str, Any]) -> None:
        """Update ticket columns by primary key."""
        await self.client.table(TICKETS_TABLE).update(fields).eq("id", ticket_id).execute()

    async def get_by_id(self, ticket_id: str) -> SupportTicket | None:
        """Get ticket by ID."""
        result = await self.client.table(TICKETS_TABLE).select("*").eq("id", ticket_id).execute()
        return SupportTicket(**result.data[0]) if result.data else None

    async def list_by_user_and_short_id(self, telegram_id: int, short_id: str) -> list[SupportTicket]:
        """
        Get a user's tickets whose ID starts with ``short_id``.

        UUID columns can't be prefix-matched through PostgREST, so the
        user's tickets are fetched and filtered here.
        """
        result = (
            await self.client.table(TICKETS_TABLE)
            .select("*")
            .eq("user_telegram_id", telegram_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [
            SupportTicket(**row)
            for row in result.data or []
            if str(row.get("id", "")).startswith(short_id)
        ]
