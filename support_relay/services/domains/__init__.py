"""Domain services."""
from .support import SupportRelayService

__all__ = ["SupportRelayService"]
