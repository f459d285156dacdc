"""Repository layer over the Supabase async client."""
from .base import BaseRepository
from .profile_repo import ProfileRepository
from .ticket_repo import TicketRepository

__all__ = ["BaseRepository", "ProfileRepository", "TicketRepository"]
