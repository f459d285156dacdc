"""API routers."""
from .support import support_router

__all__ = ["support_router"]
