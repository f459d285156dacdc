"""Telegram Mini App support relay."""

__version__ = "1.0.0"
