"""API endpoints."""

from app.api.routes import router, to_card
from app.api.websocket import manager, websocket_endpoint, ConnectionManager

__all__ = [
    "router",
    "to_card",
    "manager",
    "websocket_endpoint",
    "ConnectionManager",
]
