"""API routers for modular endpoint organization.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

from .health import router as health_router
from .reports import router as reports_router

__all__ = [
    "health_router",
    "reports_router",
]
