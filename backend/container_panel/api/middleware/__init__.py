"""
API Middleware Package

Request gating for the panel routes.
"""

from container_panel.api.middleware.auth import (
    print_auth_info,
    verify_basic_auth,
)

__all__ = [
    "print_auth_info",
    "verify_basic_auth",
]
