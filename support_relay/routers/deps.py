"""
Shared Dependencies for Routers

Services are built once in the app lifespan and read from app.state.
"""

from fastapi import Request

from support_relay.services.domains import SupportRelayService


def get_support_service(request: Request) -> SupportRelayService:
    """SupportRelayService created at startup"""
    service = getattr(request.app.state, "support_service", None)
    if service is None:
        raise RuntimeError("SupportRelayService is not initialized (app lifespan not run)")
    return service
