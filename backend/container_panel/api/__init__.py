"""
FastAPI server for the container control panel

Provides the HTML page, the htmx status fragment and the control endpoints.
"""

from container_panel.api.app import create_app

__all__ = ["create_app"]
