"""
Routes package.
"""

from .errors import ApiError
from .fetch import router as fetch_router
from .update import router as update_router

__all__ = [
    "ApiError",
    "fetch_router",
    "update_router",
]
