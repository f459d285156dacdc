"""Profile Repository - read-only lookups of known users."""

from support_relay.services.models import Profile

from .base import BaseRepository

PROFILES_TABLE = "profiles"


class ProfileRepository(BaseRepository):
    """Profile database operations."""

    async def get_by_telegram_id(self, telegram_id: int) -> Profile | None:
        """Get profile by Telegram ID."""
        result = (
            await self.client.table(PROFILES_TABLE)
            .select("id, telegram_id, first_name, username")
            .eq("telegram_id", telegram_id)
            .limit(1)
            .execute()
        )
        return Profile(**result.data[0]) if result.data else None
