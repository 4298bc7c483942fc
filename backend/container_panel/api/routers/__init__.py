"""
API Routers
"""

from container_panel.api.routers.panel import router as panel_router

__all__ = ["panel_router"]
