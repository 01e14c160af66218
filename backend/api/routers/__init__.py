"""
API Routers package.

Each module contains a FastAPI router for a specific domain.
"""

from .inventory import router as inventory_router
from .notifications import router as notifications_router
from .webhook import router as webhook_router
from .export import router as export_router

__all__ = [
    "inventory_router",
    "notifications_router",
    "webhook_router",
    "export_router",
]
